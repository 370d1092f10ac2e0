import os

import pytest


@pytest.fixture
def make_file(tmp_path):
    def _make(relpath, mode=0o755):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\n")
        os.chmod(path, mode)
        return path
    return _make
