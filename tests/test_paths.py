from datetime import date, datetime

import pytest

from levellog.levels import Level
from levellog.paths import FilenameStyle, PathResolver, file_date


def test_file_date_is_compact_and_sortable() -> None:
    assert file_date(date(2024, 3, 7)) == "20240307"
    assert file_date(datetime(2024, 12, 31, 23, 59, 59)) == "20241231"


def test_resolve_builds_canonical_layout(tmp_path) -> None:
    resolver = PathResolver(tmp_path)

    path = resolver.resolve("Billing", Level.WARN, "20240102")

    assert path == tmp_path / "Billing" / "warn" / "billing_warn_20240102.log"
    assert path.parent.is_dir()
    assert not path.exists()


def test_resolve_is_deterministic(tmp_path) -> None:
    resolver = PathResolver(tmp_path)

    first = resolver.resolve("api", Level.INFO, "20240102")
    second = resolver.resolve("api", Level.INFO, "20240102")

    assert first == second == resolver.path_for("api", Level.INFO, "20240102")


def test_date_only_style_keeps_directory_layout(tmp_path) -> None:
    resolver = PathResolver(tmp_path, style="date_only")

    path = resolver.resolve("api", Level.DEBUG, "20240102")

    assert resolver.style is FilenameStyle.DATE_ONLY
    assert path == tmp_path / "api" / "debug" / "20240102.log"


def test_unknown_level_has_its_own_directory(tmp_path) -> None:
    path = PathResolver(tmp_path).resolve("api", 99, "20240102")

    assert path == tmp_path / "api" / "unknown" / "api_unknown_20240102.log"


def test_path_for_has_no_side_effects(tmp_path) -> None:
    PathResolver(tmp_path).path_for("api", Level.ERROR, "20240102")

    assert list(tmp_path.iterdir()) == []


def test_directory_failure_is_reported_not_raised(tmp_path, caplog) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    resolver = PathResolver(blocker)

    with caplog.at_level("WARNING", logger="levellog.diagnostics"):
        path = resolver.resolve("api", Level.INFO, "20240102")

    assert path == blocker / "api" / "info" / "api_info_20240102.log"
    assert "Could not create log directory" in caplog.text


def test_unknown_style_is_rejected(tmp_path) -> None:
    with pytest.raises(ValueError):
        PathResolver(tmp_path, style="hourly")
