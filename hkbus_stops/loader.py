import logging

import requests

from .cache import DatasetCache
from .config import Config
from .dataset import Dataset


class DatasetLoadError(RuntimeError):
    """The dataset could not be fetched, read or parsed."""


class DatasetLoader:
    """
    Obtains the hkbus dataset from the on-disk cache, a local file or the network,
    in that order of preference.
    """

    def __init__(self, url=None, path=None, cache=None, cache_key=None, timeout=None):
        self.url = url or Config.DATASET_URL
        self.path = path if path is not None else Config.DATASET_PATH
        self.cache = cache if cache is not None else DatasetCache(Config.CACHE_DIR)
        self.cache_key = cache_key or Config.CACHE_KEY
        self.timeout = timeout or Config.REQUEST_TIMEOUT

    def load(self, use_cache=True) -> Dataset:
        """
        Return a freshly parsed Dataset. Raises DatasetLoadError on failure.
        """
        if use_cache:
            dataset = self._read_cache()
            if dataset is not None:
                return dataset

        if self.path:
            text = self._read_file()
        else:
            text = self._fetch_remote()

        try:
            dataset = Dataset.from_json(text)
        except (TypeError, ValueError) as e:
            raise DatasetLoadError(f"Failed to parse HKBus data: {e}") from e

        self._write_cache(dataset)
        return dataset

    def _read_cache(self):
        payload = self.cache.get(self.cache_key)
        if payload is None:
            return None
        try:
            dataset = Dataset.from_payload(payload)
        except (TypeError, ValueError) as e:
            logging.warning("Discarding unusable cached dataset: %s", e)
            return None
        logging.debug("Loaded bus data from cache '%s'", self.cache_key)
        return dataset

    def _read_file(self):
        logging.info("Reading HKBus data from %s", self.path)
        try:
            with open(self.path, encoding='utf-8') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetLoadError(f"Failed to read HKBus data from {self.path}: {e}") from e

    def _fetch_remote(self):
        logging.info("Fetching HKBus data from %s", self.url)
        headers = {"accept": "application/json"}
        try:
            response = requests.get(self.url, headers=headers, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise DatasetLoadError(f"Timeout fetching HKBus data from {self.url}") from e
        except requests.exceptions.RequestException as e:
            raise DatasetLoadError(f"Request error fetching HKBus data: {e}") from e
        if response.status_code != 200:
            raise DatasetLoadError(f"Failed to load HKBus data: HTTP {response.status_code}")
        return response.text

    def _write_cache(self, dataset):
        try:
            self.cache.set(self.cache_key, dataset.to_payload())
        except (OSError, TypeError, ValueError) as e:
            logging.warning("Cache write error for '%s': %s", self.cache_key, e)
