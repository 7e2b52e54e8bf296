""" Invoke tasks. """
import os
import sys
import io
from invoke.tasks import task

if isinstance(sys.stdout, io.TextIOWrapper):
    sys.stdout.reconfigure(encoding='utf-8')


@task
def install(c):
    c.run("pip install -e .[test,dev]")


@task
def back(c, port=8001):
    c.run(f"uvicorn main:app --reload --host 127.0.0.1 --port {port}")


@task
def schedule(c, data=None, time_limit=None):
    """Solve the scheduling demo (or the JSON file given with --data) from the CLI."""
    args = ["python", "cli.py", "schedule"]
    if data:
        args += ["--data", data]
    if time_limit:
        args += ["--time-limit", str(time_limit)]
    c.run(" ".join(args), env={"PYTHONUTF8": "1"})


@task
def route(c, data=None, time_limit=None):
    """Solve the routing demo (or the JSON file given with --data) from the CLI."""
    args = ["python", "cli.py", "route"]
    if data:
        args += ["--data", data]
    if time_limit:
        args += ["--time-limit", str(time_limit)]
    c.run(" ".join(args), env={"PYTHONUTF8": "1"})


@task
def test(c):
    c.run("pytest -q tests")


@task
def clean(c):
    """
    Cross-platform clean task to remove all __pycache__ folders and .pyc files.
    """
    if os.name == 'nt':  # Windows
        c.run("for /R %f in (*.pyc) do del /F /Q \"%f\"", warn=True)
        c.run('for /d /r %d in (__pycache__) do @if exist "%d" rmdir /s /q "%d"', warn=True)
    else:  # Unix/Linux/macOS
        c.run("find . -type f -name '*.pyc' -delete", warn=True)
        c.run("find . -type d -name '__pycache__' -exec rm -r {} +", warn=True)
