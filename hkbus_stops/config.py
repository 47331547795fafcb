import os
from dotenv import load_dotenv
from platformdirs import user_cache_dir

# Load environment variables from .env file if it exists
load_dotenv()


def _split_list(value):
    return tuple(item.strip() for item in value.split(',') if item.strip())


class Config:
    """
    Configuration class for HK Bus Stops.
    This class loads configuration values from environment variables or uses default values.
    """
    # General configuration
    DEBUG = os.environ.get('DEBUG', 'False') == 'True'

    # Dataset source: a local file wins over the URL when set
    DATASET_URL = os.environ.get('HKBUS_DATASET_URL', 'https://data.hkbus.app/routeFareList.min.json')
    DATASET_PATH = os.environ.get('HKBUS_DATASET_PATH')
    REQUEST_TIMEOUT = float(os.environ.get('HKBUS_REQUEST_TIMEOUT', 30))

    # On-disk cache of the parsed dataset
    CACHE_DIR = os.environ.get('HKBUS_CACHE_DIR', user_cache_dir('hkbus_stops'))
    CACHE_KEY = os.environ.get('HKBUS_CACHE_KEY', 'hkbus_data_v1')

    # Query defaults
    DEFAULT_OPERATORS = _split_list(os.environ.get('HKBUS_DEFAULT_OPERATORS', 'kmb,ctb'))
    PREFERRED_LANGUAGES = _split_list(os.environ.get('HKBUS_PREFERRED_LANGUAGES', 'zh,tc'))
    FALLBACK_LANGUAGE = os.environ.get('HKBUS_FALLBACK_LANGUAGE', 'en')
