import inspect

from levellog.caller import CallerInfo, capture_caller


def _where_was_i_called():
    return capture_caller()


def test_capture_caller_reports_calling_function() -> None:
    line = inspect.currentframe().f_lineno + 1
    info = _where_was_i_called()

    assert info is not None
    assert info.function.endswith("test_capture_caller_reports_calling_function")
    assert info.file.endswith("test_caller.py")
    assert info.line == line


def test_capture_caller_too_deep_returns_none() -> None:
    assert capture_caller(depth=10_000) is None


def test_render_matches_log_position_shape() -> None:
    info = CallerInfo(function="pkg.func", file="/src/pkg.py", line=12)

    assert info.render() == "[funcName: pkg.func, file: /src/pkg.py:12]"
