import os
import sys
import logging
from logging.handlers import RotatingFileHandler
import tempfile
import glob


class LazyRotatingFileHandler(RotatingFileHandler):
    """Rotating log file kept in a private temporary directory.

    The directory is picked by prefix: an existing ``<tmp>/<prefix>*``
    directory is reused when it is owned by us, has mode 0700 and holds no
    symlinks. Otherwise a fresh one is made with ``mkdtemp``.
    """

    def __init__(self, tmpdir_prefix='', basename=None, *args, **kwargs):

        self.base_dir = self._create_temp_dir(tmpdir_prefix)
        kwargs['filename'] = os.path.join(self.base_dir, basename)
        super().__init__(*args, **kwargs)


    @staticmethod
    def _tmpdir_usable(path):

        if not os.path.isdir(path) or os.path.islink(path):
            return False
        st = os.stat(path)
        if st.st_uid != os.getuid() or (st.st_mode & 0o777) != 0o700:
            return False
        for item in os.listdir(path):
            if os.path.islink(os.path.join(path, item)):
                return False
        return True

    @classmethod
    def _create_temp_dir(cls, tmpdir_prefix):

        existing_dirs = []
        if tmpdir_prefix:
            existing_dirs.extend(sorted(glob.glob(os.path.join(tempfile.gettempdir(), f"{tmpdir_prefix}*"))))

        for dir_ in existing_dirs:
            if cls._tmpdir_usable(dir_):
                return dir_

        # mkdtemp already creates the directory with mode 0700
        return tempfile.mkdtemp(prefix=tmpdir_prefix)


def setup_logger(prefix, name=None, level=logging.DEBUG):
    """Attach a per-process rotating log file and a stderr handler to a logger."""
    pid = os.getpid()
    log_file = f"log_{pid}.log"
    logger = logging.getLogger(name)
    logger.setLevel(level)
    handler = LazyRotatingFileHandler(tmpdir_prefix=prefix, basename=log_file,
                                      maxBytes=10*(1024 ** 2), backupCount=3)
    logger.addHandler(handler)
    stderr_handler = logging.StreamHandler(sys.stderr)
    logger.addHandler(stderr_handler)
    logger.debug(f"logging to {handler.baseFilename}")
    return logger
