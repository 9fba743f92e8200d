import logging

from gedcom_import.logging import get_logger, list_active_loggers, set_level


def test_module_loggers_live_under_package_namespace():
    log = get_logger("cli")
    assert log.name == "gedcom_import.cli"
    assert log.propagate is True
    assert "gedcom_import.cli" in list_active_loggers()


def test_dotted_module_names_are_kept():
    assert get_logger("gedcom_import.records.assembler").name == "gedcom_import.records.assembler"


def test_base_logger_owns_console_handler():
    base = get_logger()
    assert base.name == "gedcom_import"
    assert base.propagate is False
    assert any(isinstance(h, logging.StreamHandler) for h in base.handlers)


def test_set_level_updates_cached_loggers():
    log = get_logger("tests.level")
    previous = get_logger().level
    try:
        set_level(logging.DEBUG)
        assert log.level == logging.DEBUG
        assert get_logger().level == logging.DEBUG
    finally:
        set_level(previous)


def test_relative_log_dir_resolves_under_project_root(monkeypatch, tmp_path):
    from gedcom_import.config import GIConfig
    from gedcom_import.logging import logger as logger_module

    monkeypatch.setattr(
        logger_module,
        "get_config",
        lambda: GIConfig({"logging": {"dir": "logs"}}),
    )
    monkeypatch.setattr(logger_module, "resolve_project_path", lambda rel: tmp_path / rel)

    assert logger_module._log_dir() == tmp_path / "logs"
    assert (tmp_path / "logs").is_dir()
