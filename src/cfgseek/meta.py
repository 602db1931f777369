"""Package metadata for cfgseek."""

__app_name__ = "cfgseek"
__version__ = "0.3.1"
__description__ = "Find, load and materialize a single configuration file from prioritized directories."
__license_type__ = "MIT"
