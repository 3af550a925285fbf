from . import mock_carrier  # noqa: F401 ensure registration
