import io

import pytest

from doclientkit.version import (
    BuildInfo,
    component_version,
    output_version_if_needed,
    simple_version,
)

INFO = BuildInfo(
    name="deliveryoptimization-plugin-apt",
    version="0.1.1",
    build_time="20200819.000911",
    git_head_revision="70fc72d",
    git_head_name="main",
)


def test_documented_example():
    assert (
        component_version(False, INFO)
        == "deliveryoptimization-plugin-apt/v0.1.1+20200819.000911.70fc72d"
    )


def test_extras_append_head_name():
    assert component_version(True, INFO) == component_version(False, INFO) + " (main)"


def test_simple_version():
    assert simple_version(INFO) == INFO.version


def test_builder_prefix():
    info = BuildInfo(name="comp", version="1.2.3", builder="ci")
    assert component_version(True, info) == "ci;comp/v1.2.3"


def test_revision_without_build_time_uses_plus():
    info = BuildInfo(name="comp", version="1.2.3", git_head_revision="abc")
    assert component_version(True, info) == "comp/v1.2.3+abc"


def test_default_info_has_name_and_version():
    assert component_version() == f"{BuildInfo().name}/v{simple_version()}"


@pytest.mark.parametrize("flag, extras", [("--version", False), ("-v", False), ("--version-extra", True)])
def test_output_version_flags(flag, extras):
    out = io.StringIO()
    assert output_version_if_needed(["prog", flag], INFO, out) is True
    assert out.getvalue() == component_version(extras, INFO) + "\n"


@pytest.mark.parametrize("argv", [["prog"], ["prog", "--help"], ["prog", "--version", "x"]])
def test_output_version_not_needed(argv):
    out = io.StringIO()
    assert output_version_if_needed(argv, INFO, out) is False
    assert out.getvalue() == ""