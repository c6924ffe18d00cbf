# listing_autocompleter/utils/__init__.py
# logging, config, timing and threading helpers shared by the app

from .logger_utils import Log, log
from .config_manager import Config
from .metrics_tracker import Metrics
from .threaded_runner import run_parallel

__all__ = ["Log", "log", "Config", "Metrics", "run_parallel"]
