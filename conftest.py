pytest_plugins = ["ghdispatch.testing.conftest"]
