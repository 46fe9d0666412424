import statmonoids


def test_package_version() -> None:
    assert isinstance(statmonoids.__version__, str)
    assert statmonoids.package_version("no-such-distribution") == "no-such-distribution is not installed."
