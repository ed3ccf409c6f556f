"""Shared test configuration for sqldiff."""

import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

import pytest


PY_DIR = Path(__file__).parent.parent / "py"


def load_python_impl():
    """Load the Python implementation from the py/ directory."""
    sys.path.insert(0, str(PY_DIR))
    import sqldiff
    return sqldiff


@pytest.fixture(scope="session")
def lib():
    """Load the sqldiff package."""
    return load_python_impl()


class SqlDiffCli:
    """Helper class to run the sqldiff command in a subprocess."""

    def __init__(self, work_dir: Path):
        self.work_dir = work_dir

    def write(self, name: str, content: str) -> Path:
        """Write a file into the working directory."""
        path = self.work_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    def run(self, *args: str, input: Optional[str] = None,
            env: Optional[dict] = None) -> subprocess.CompletedProcess:
        """Run a sqldiff command."""
        run_env = {**os.environ, "PYTHONPATH": str(PY_DIR)}
        run_env.pop("NO_COLOR", None)
        run_env.pop("SQLDIFF_WIDTH", None)
        run_env.pop("SQLDIFF_ALGORITHM", None)
        if env:
            run_env.update(env)
        return subprocess.run(
            [sys.executable, "-m", "sqldiff", *args],
            cwd=self.work_dir,
            capture_output=True,
            text=True,
            input=input,
            env=run_env,
        )


@pytest.fixture
def cli(tmp_path):
    """Provide a CLI runner working in a temporary directory."""
    return SqlDiffCli(tmp_path)


ORACLE_EMPLOYEES = """SELECT
  e.employee_id,
  e.first_name,
  e.last_name,
  d.department_name,
  NVL(e.salary, 0) AS salary
FROM employees e
INNER JOIN departments d
  ON e.department_id = d.department_id
WHERE ROWNUM <= 10
ORDER BY e.employee_id"""

POSTGRES_EMPLOYEES = """SELECT
  e.employee_id,
  e.first_name,
  e.last_name,
  d.department_name,
  COALESCE(e.salary, 0) AS salary
FROM employees e
INNER JOIN departments d
  ON e.department_id = d.department_id
ORDER BY e.employee_id
LIMIT 10"""


@pytest.fixture
def employee_query():
    """The Oracle and PostgreSQL versions of the employee query."""
    return ORACLE_EMPLOYEES, POSTGRES_EMPLOYEES
