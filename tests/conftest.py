"""Shared test fixtures for Stability Assurance tests."""

import os
import textwrap

import pytest

from stability_assurance.models import ClassDecl, DeclarationSite, Function, Variable


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SAT_* variables from the developer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("SAT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def make_function():
    """Factory for methods: name plus the member names it calls and accesses."""

    def _make(name="method", calls=(), accesses=(), file_path="app.py", line=1):
        return Function(
            declaration=DeclarationSite(name, file_path, line),
            signature_text="(self)",
            called_names=calls,
            accessed_names=accesses,
        )

    return _make


@pytest.fixture
def make_class(make_function):
    """Factory for classes; ``methods`` is a method count or a list of Functions."""

    def _make(name, methods=(), parents=(), variables=(), file_path="app.py", line=1):
        if isinstance(methods, int):
            methods = [make_function(f"method_{i}", file_path=file_path) for i in range(methods)]
        return ClassDecl(
            name=name,
            declaration=DeclarationSite(name, file_path, line),
            parent_names=frozenset(parents),
            functions=tuple(methods),
            variables=tuple(
                Variable(DeclarationSite(var, file_path, line)) for var in variables
            ),
        )

    return _make


@pytest.fixture
def write_project(tmp_path):
    """Write ``{relative path: source}`` under a project directory."""

    def _write(files, root="project"):
        project = tmp_path / root
        for relative, source in files.items():
            path = project / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source), encoding="utf-8")
        return project

    return _write


@pytest.fixture
def stable_project(write_project):
    """Three small classes with no calls: every metric is good."""
    return write_project(
        {
            "shapes.py": """\
                class Circle:
                    def area(self):
                        return 3

                    def perimeter(self):
                        return 6


                class Square:
                    def area(self):
                        return 4

                    def perimeter(self):
                        return 8


                class Line:
                    def length(self):
                        return 1

                    def width(self):
                        return 0
                """,
        }
    )
