import pytest
from PyQt6.QtCore import QCoreApplication


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def sample_dir(tmp_path):
    (tmp_path / ".hidden").write_text("x")
    (tmp_path / "B.txt").write_text("bb")
    (tmp_path / "a.txt").write_bytes(b"a" * 500)
    (tmp_path / "sub").mkdir()
    return tmp_path


@pytest.fixture
def model(qapp):
    from fbrowser.ui.dir_model import DirModel
    m = DirModel()
    yield m
    m.cancelScan()
