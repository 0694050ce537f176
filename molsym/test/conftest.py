import os

import numpy as np
import pytest


@pytest.fixture
def in_tmp_dir(tmp_path):
    cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(cwd)


@pytest.fixture(autouse=True)
def no_tolerance_from_environment(monkeypatch):
    monkeypatch.delenv('MOLSYM_TOLERANCE', raising=False)


@pytest.fixture
def tetrahedron():
    return np.array([[1.0, 1.0, 1.0],
                     [1.0, -1.0, -1.0],
                     [-1.0, 1.0, -1.0],
                     [-1.0, -1.0, 1.0]])


@pytest.fixture
def octahedron():
    return np.array([[1.0, 0.0, 0.0],
                     [-1.0, 0.0, 0.0],
                     [0.0, 1.0, 0.0],
                     [0.0, -1.0, 0.0],
                     [0.0, 0.0, 1.0],
                     [0.0, 0.0, -1.0]])


@pytest.fixture
def square():
    """Square in the xy-plane centered at the origin."""
    return np.array([[1.0, 0.0, 0.0],
                     [0.0, 1.0, 0.0],
                     [-1.0, 0.0, 0.0],
                     [0.0, -1.0, 0.0]])
