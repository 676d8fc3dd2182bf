"""
Card theme discovery.

Walks the given search roots and asks each registered theme format
whether a directory holds one of its themes.

INVARIANTS:
- A malformed theme is rejected on its own; discovery always continues
- Earlier search roots shadow later ones for the same preference key
- Search roots are passed in explicitly, never read from the environment
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from cardthemes.models.failure import CardsetParseError, FailureDetail
from cardthemes.models.theme import CardThemeInfo
from cardthemes.services.theme_provider import THEME_PROVIDERS, CardThemeProvider

logger = logging.getLogger(__name__)

DirectoryLister = Callable[[Path], Iterable[str]]


@dataclass(frozen=True, slots=True)
class ThemeRejection:
    """A directory that looked like a theme but could not be parsed."""

    root: Path
    subdirectory: str
    failure: FailureDetail


@dataclass
class DiscoveryResult:
    """Result of scanning the search roots."""

    themes: list[CardThemeInfo] = field(default_factory=list)
    """Accepted themes, in search order."""

    rejected: list[ThemeRejection] = field(default_factory=list)
    """Candidate directories refused by their parser."""

    skipped: int = 0
    """Directories no format recognised."""

    def find(self, pref_name: str) -> CardThemeInfo | None:
        """Look up an accepted theme by preference key."""
        for info in self.themes:
            if info.pref_name == pref_name:
                return info
        return None


def list_subdirectories(root: Path) -> list[str]:
    """
    Names of the directories directly under root, sorted.

    A missing or unreadable root yields no names.
    """
    if not root.is_dir():
        return []
    try:
        return sorted(entry.name for entry in root.iterdir() if entry.is_dir())
    except OSError as e:
        logger.warning("Cannot list theme directory %s: %s", root, e)
        return []


def discover_themes(
    search_roots: Sequence[Path | str],
    providers: Iterable[type[CardThemeProvider]] | None = None,
    list_directory: DirectoryLister = list_subdirectories,
) -> DiscoveryResult:
    """
    Find every theme under the search roots.

    Args:
        search_roots: Directories to scan, highest priority first
        providers: Theme formats to try, defaults to all registered formats
        list_directory: Yields candidate subdirectory names for a root

    Returns:
        DiscoveryResult with accepted themes and rejections
    """
    provider_classes = list(providers) if providers is not None else list(THEME_PROVIDERS.values())
    result = DiscoveryResult()
    seen: set[str] = set()

    for root in map(Path, search_roots):
        for subdirectory in list_directory(root):
            recognised = False

            for provider_class in provider_classes:
                outcome = provider_class.get_theme_info(root, subdirectory)
                if outcome is None:
                    continue

                recognised = True
                if isinstance(outcome, CardsetParseError):
                    result.rejected.append(
                        ThemeRejection(
                            root=root,
                            subdirectory=subdirectory,
                            failure=outcome.to_detail(),
                        )
                    )
                    logger.warning(
                        "cardset_rejected",
                        extra={
                            "kind": outcome.kind.value,
                            "path": str(root / subdirectory),
                            "reason": outcome.message,
                        },
                    )
                elif outcome.pref_name in seen:
                    logger.debug(
                        "Theme %s in %s is shadowed by an earlier root", outcome.pref_name, root
                    )
                else:
                    seen.add(outcome.pref_name)
                    result.themes.append(outcome)
                    logger.info("Found theme %s (%s)", outcome.display_name, outcome.pref_name)
                break

            if not recognised:
                result.skipped += 1
                logger.debug("Skipping %s in %s: not a theme directory", subdirectory, root)

    logger.info(
        "cardset_discovery_complete",
        extra={
            "accepted_count": len(result.themes),
            "rejected_count": len(result.rejected),
            "skipped_count": result.skipped,
        },
    )
    return result
