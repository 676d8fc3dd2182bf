"""
List installed card themes.

Scans the configured search roots (or the ones given with --root) and
prints every accepted theme and every rejected cardset directory.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel

from cardthemes.config import Settings
from cardthemes.models.failure import FailureDetail
from cardthemes.services.discovery import DiscoveryResult, discover_themes
from cardthemes.services.theme_provider import THEME_PROVIDERS

logger = logging.getLogger(__name__)


class ThemeSummary(BaseModel):
    pref_name: str
    display_name: str
    path: str
    card_width: int
    card_height: int
    image_extension: str
    backs: list[str]
    default_back: str


class RejectionSummary(BaseModel):
    path: str
    failure: FailureDetail


class DiscoveryReport(BaseModel):
    search_roots: list[str]
    themes: list[ThemeSummary]
    rejected: list[RejectionSummary]

    @classmethod
    def from_result(cls, roots: Sequence[Path], result: DiscoveryResult) -> "DiscoveryReport":
        return cls(
            search_roots=[str(root) for root in roots],
            themes=[
                ThemeSummary(
                    pref_name=info.pref_name,
                    display_name=info.display_name,
                    path=str(info.descriptor.base_path),
                    card_width=info.descriptor.card_width,
                    card_height=info.descriptor.card_height,
                    image_extension=info.descriptor.image_extension,
                    backs=list(info.descriptor.backs),
                    default_back=info.descriptor.default_back,
                )
                for info in result.themes
            ],
            rejected=[
                RejectionSummary(
                    path=str(rejection.root / rejection.subdirectory),
                    failure=rejection.failure,
                )
                for rejection in result.rejected
            ],
        )


def configured_search_roots(settings: Settings) -> list[Path]:
    """Search roots of every registered format, without duplicates."""
    roots: list[Path] = []
    for provider_class in THEME_PROVIDERS.values():
        for root in provider_class.search_roots(settings):
            if root not in roots:
                roots.append(root)
    return roots


def format_report(report: DiscoveryReport) -> str:
    """Plain-text listing of a discovery report."""
    lines = [f"Searched: {', '.join(report.search_roots) or '(nothing)'}", ""]

    if report.themes:
        lines.append(f"Themes ({len(report.themes)}):")
        for theme in report.themes:
            lines.append(
                f"  {theme.pref_name:<32} {theme.display_name}  "
                f"{theme.card_width}x{theme.card_height}{theme.image_extension}  "
                f"{len(theme.backs)} back(s), default {theme.default_back}"
            )
    else:
        lines.append("No themes found.")

    if report.rejected:
        lines.append("")
        lines.append(f"Rejected ({len(report.rejected)}):")
        for rejection in report.rejected:
            reason = rejection.failure.message
            if rejection.failure.detail:
                reason = f"{reason} ({rejection.failure.detail})"
            lines.append(f"  {rejection.path}: {rejection.failure.kind.value}: {reason}")

    return "\n".join(lines)


def run_listing(roots: Sequence[Path], as_json: bool = False) -> str:
    """Discover themes under roots and render the report."""
    logger.info("Scanning %d search root(s) for card themes...", len(roots))
    result = discover_themes(roots)
    report = DiscoveryReport.from_result(roots, result)

    if as_json:
        return report.model_dump_json(indent=2)
    return format_report(report)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="List installed PySol card themes")
    parser.add_argument(
        "--root",
        type=Path,
        action="append",
        help="Search root (repeatable); replaces the configured roots",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every directory examined",
    )

    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    roots = args.root or configured_search_roots(settings)
    print(run_listing(roots, as_json=args.json))


if __name__ == "__main__":
    main()
