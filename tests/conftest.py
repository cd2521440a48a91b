"""Shared pytest fixtures for SmartCI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import load_dotenv
from hypothesis import settings

from smartci.core.config import SmartCIConfig

# Load environment variables from .env file
load_dotenv()

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")


FOO_MODEL = """<?php
class Foo_model extends CI_Model
{
    /**
     * Compute baz
     * @param int $n
     */
    public function bar_baz($n)
    {
        return $n;
    }

    // Fetch every row
    // ordered by id
    public function fetch_all()
    {
        return [];
    }

    # Hash style comment
    public function hashed() {
        return 1;
    }
}
"""

EBEI_MODEL = """<?php
class Ebei_model extends CI_Model
{
    public function lookup(
        $id,
        $fallback = null
    ) {
        return $id;
    }
}
"""

CONTROLLER = """<?php
class Home extends CI_Controller {
    public function index() {
        $this->load->model('foo_model');
        $this->load->model("common/ebei_model");
        $rows = $this->foo_model->bar_baz(1);
        $row = $this->ebei_model->lookup(2);
        $all = $this->foo_service->bar_baz(1);
        $none = $this->foo_model->missing_method();
    }
}
"""


def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def config() -> SmartCIConfig:
    """Configuration with defaults only (environment and .env ignored)."""
    return SmartCIConfig(_env_file=None)


@pytest.fixture
def ci_workspace(tmp_path: Path) -> Path:
    """Workspace with a CI3 subproject holding two application directories."""
    workspace = tmp_path / "workspace"
    project = workspace / "CI3"
    write_file(project / "app" / "models" / "Foo_model.php", FOO_MODEL)
    write_file(project / "app_common" / "models" / "common" / "Ebei_model.php", EBEI_MODEL)
    write_file(project / "app" / "controllers" / "Home.php", CONTROLLER)
    return workspace


@pytest.fixture
def controller_path(ci_workspace: Path) -> Path:
    return ci_workspace / "CI3" / "app" / "controllers" / "Home.php"


@pytest.fixture
def foo_model_path(ci_workspace: Path) -> Path:
    return ci_workspace / "CI3" / "app" / "models" / "Foo_model.php"


@pytest.fixture
def ebei_model_path(ci_workspace: Path) -> Path:
    return ci_workspace / "CI3" / "app_common" / "models" / "common" / "Ebei_model.php"
