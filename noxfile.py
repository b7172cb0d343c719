import nox

nox.options.sessions = ["lint", "tests"]


@nox.session(python=["3.9", "3.10", "3.11", "3.12"])
def tests(session):
    """Run the test suite."""
    session.install("-e", ".[dev]")
    session.run("pytest", *session.posargs)


@nox.session
def lint(session):
    """Lint using flake8."""
    session.install("flake8", "flake8-docstrings")
    session.run("flake8", "src", "tests")


@nox.session
def black(session):
    """Run black code formatter."""
    session.install("black")
    session.run("black", "src", "tests")


@nox.session
def isort(session):
    """Run isort import sorter."""
    session.install("isort")
    session.run("isort", "src", "tests")


@nox.session
def mypy(session):
    """Run mypy type checker."""
    session.install("mypy")
    session.install(".")
    session.run("mypy", "src")
