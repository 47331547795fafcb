import json
import logging
import os
import tempfile


class DatasetCache:
    """
    File-backed key-value store for dataset payloads, one JSON file per key.
    Read errors count as a miss; write errors are reported to the caller.
    """

    def __init__(self, cache_dir):
        self.cache_dir = cache_dir

    def _path(self, key):
        return os.path.join(self.cache_dir, f"{key}.json")

    def get(self, key):
        path = self._path(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logging.warning("Cache read error for '%s': %s", key, e)
            return None

    def set(self, key, payload):
        os.makedirs(self.cache_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.cache_dir, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(payload, f, ensure_ascii=False)
            os.replace(tmp_path, self._path(key))
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

