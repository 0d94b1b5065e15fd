import pytest

from pixmatrix.utils.optional_deps import optional_import, pip_name, require


def test_optional_import_missing():
    module, error = optional_import("this_package_does_not_exist_123")
    assert module is None
    assert error is not None


def test_require_raises_importerror_with_hint():
    with pytest.raises(ImportError) as exc:
        require("this_package_does_not_exist_123", purpose="unit test")
    message = str(exc.value)
    assert "for unit test" in message
    assert "pip install 'this_package_does_not_exist_123'" in message


def test_pip_name_overrides():
    assert pip_name("cv2") == "opencv-python"
    assert pip_name("yaml") == "PyYAML"
    assert pip_name("numpy.linalg") == "numpy"


def test_require_returns_module():
    assert require("numpy").__name__ == "numpy"
