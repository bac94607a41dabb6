"""structlog 配置的单元测试."""

import importlib

import pytest
import structlog
from flask import Flask

from formbind.utils.logging.handlers import DebugFilter
from formbind.utils.structlog_config import StructlogConfig, get_logger


def _host_processor(_logger, _method_name, event_dict):
    return event_dict


@pytest.fixture
def _restore_structlog():
    saved = structlog.get_config()
    yield
    structlog.configure(**saved)


@pytest.mark.unit
@pytest.mark.usefixtures("_restore_structlog")
def test_import_keeps_host_structlog_configuration() -> None:
    structlog.configure(processors=[_host_processor, structlog.processors.JSONRenderer()])

    import formbind.binding.binder as binder_module

    importlib.reload(binder_module)
    get_logger("form_binding")

    processors = structlog.get_config()["processors"]
    assert processors[0] is _host_processor
    assert not any(isinstance(processor, DebugFilter) for processor in processors)


@pytest.mark.unit
@pytest.mark.usefixtures("_restore_structlog")
def test_configure_installs_debug_filter_from_app_config() -> None:
    app = Flask(__name__)
    app.config["FORMBIND_ENABLE_DEBUG_LOG"] = True
    config = StructlogConfig()

    config.configure(app)

    assert config.configured is True
    assert config.debug_filter.enabled is True
    assert structlog.get_config()["processors"][0] is config.debug_filter
