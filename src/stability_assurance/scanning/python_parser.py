"""Populate the declaration model from Python source via AST.

Every ``class`` statement becomes a ClassDecl, nested classes included.
Methods are the ``def``/``async def`` statements directly in a class body.
Inside a method, ``x.name(...)`` records ``name`` as a called member and
any other ``x.name`` records ``name`` as an accessed member. Calls are
identified by the member name only; nothing is resolved across files.
"""

from __future__ import annotations

import ast
import warnings
from collections import deque
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from ..exceptions import FileAccessError, ParsingError
from ..models import ClassDecl, DeclarationSite, Function, Variable

FunctionNode = Union[ast.FunctionDef, ast.AsyncFunctionDef]


class _MemberUseCollector(ast.NodeVisitor):
    """Collect member calls and member accesses in source order."""

    def __init__(self) -> None:
        self.called: List[str] = []
        self.accessed: List[str] = []

    def collect(self, statements: List[ast.stmt]) -> Tuple[List[str], List[str]]:
        for statement in statements:
            self.visit(statement)
        return self.called, self.accessed

    def visit_Call(self, node: ast.Call) -> None:
        if isinstance(node.func, ast.Attribute):
            self.called.append(node.func.attr)
            # the receiver may itself be a member access: self.items.append()
            self.visit(node.func.value)
        else:
            self.visit(node.func)
        for arg in node.args:
            self.visit(arg)
        for keyword in node.keywords:
            self.visit(keyword)

    def visit_Attribute(self, node: ast.Attribute) -> None:
        self.accessed.append(node.attr)
        self.generic_visit(node)

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        # nested classes are collected on their own
        return None


class _ClassBuilder:
    def __init__(self, name: str, site: DeclarationSite, parents: List[str]):
        self.name = name
        self.site = site
        self.parents = parents
        self.functions: List[Function] = []
        self.variables: List[Variable] = []

    def build(self) -> ClassDecl:
        return ClassDecl(
            name=self.name,
            declaration=self.site,
            parent_names=frozenset(self.parents),
            functions=tuple(self.functions),
            variables=tuple(self.variables),
        )


class DeclarationCollector(ast.NodeVisitor):
    """Walk a module and collect its classes in order of appearance."""

    def __init__(self, source: str, file_path: str):
        self.source = source
        self.file_path = file_path
        self._builders: List[_ClassBuilder] = []

    @property
    def classes(self) -> Tuple[ClassDecl, ...]:
        return tuple(builder.build() for builder in self._builders)

    def _site(self, name: str, node: ast.AST) -> DeclarationSite:
        return DeclarationSite(name=name, file_path=self.file_path, line=max(1, node.lineno))

    def _segment(self, node: ast.AST) -> str:
        return ast.get_source_segment(self.source, node) or ""

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        builder = _ClassBuilder(
            node.name,
            self._site(node.name, node),
            [ast.unparse(base) for base in node.bases],
        )
        self._builders.append(builder)

        for statement in node.body:
            if isinstance(statement, (ast.FunctionDef, ast.AsyncFunctionDef)):
                self._add_function(builder, statement)
            elif isinstance(statement, (ast.Assign, ast.AnnAssign)):
                self._add_class_variables(builder, statement)
            else:
                self.visit(statement)

    def _add_function(self, builder: _ClassBuilder, node: FunctionNode) -> None:
        called, accessed = _MemberUseCollector().collect(node.body)
        builder.functions.append(
            Function(
                declaration=self._site(node.name, node),
                signature_text=_signature(node),
                body_text=self._segment(node),
                called_names=tuple(called),
                accessed_names=tuple(accessed),
            )
        )
        for sub in _walk_own_statements(node):
            if isinstance(sub, (ast.Assign, ast.AnnAssign)):
                targets = sub.targets if isinstance(sub, ast.Assign) else [sub.target]
                for target in targets:
                    for name in _self_attribute_names(target):
                        builder.variables.append(
                            Variable(self._site(name, sub), self._segment(sub))
                        )

        # classes defined inside the method body
        for statement in node.body:
            self.visit(statement)

    def _add_class_variables(
        self, builder: _ClassBuilder, node: Union[ast.Assign, ast.AnnAssign]
    ) -> None:
        targets = node.targets if isinstance(node, ast.Assign) else [node.target]
        for target in targets:
            for name in _bound_names(target):
                builder.variables.append(Variable(self._site(name, node), self._segment(node)))


def _walk_own_statements(node: ast.AST) -> Iterator[ast.AST]:
    """Like ``ast.walk`` but without descending into nested classes."""
    pending = deque([node])
    while pending:
        current = pending.popleft()
        yield current
        pending.extend(
            child for child in ast.iter_child_nodes(current) if not isinstance(child, ast.ClassDef)
        )


def _signature(node: FunctionNode) -> str:
    signature = f"({ast.unparse(node.args)})"
    if node.returns is not None:
        signature += f" -> {ast.unparse(node.returns)}"
    return signature


def _bound_names(target: ast.expr) -> List[str]:
    if isinstance(target, ast.Name):
        return [target.id]
    if isinstance(target, (ast.Tuple, ast.List)):
        return [name for element in target.elts for name in _bound_names(element)]
    return []


def _self_attribute_names(target: ast.expr) -> List[str]:
    if (
        isinstance(target, ast.Attribute)
        and isinstance(target.value, ast.Name)
        and target.value.id == "self"
    ):
        return [target.attr]
    if isinstance(target, (ast.Tuple, ast.List)):
        return [name for element in target.elts for name in _self_attribute_names(element)]
    return []


def parse_source(source: str, file_path: str = "<string>") -> Tuple[ClassDecl, ...]:
    """Parse Python source and return its classes.

    Raises:
        ParsingError: If the source is not valid Python
    """
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", SyntaxWarning)
            tree = ast.parse(source, filename=file_path)
    except SyntaxError as e:
        raise ParsingError(Path(file_path), e.msg or "invalid syntax", e.lineno) from e
    except ValueError as e:
        # e.g. source containing null bytes
        raise ParsingError(Path(file_path), str(e)) from e

    collector = DeclarationCollector(source, file_path)
    collector.visit(tree)
    return collector.classes


def read_source(path: Path) -> str:
    """Read a source file as text.

    Raises:
        FileAccessError: If the file cannot be read
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileAccessError(path, f"Cannot read file: {e}") from e


def parse_file(path: Path, display_path: Optional[str] = None) -> Tuple[ClassDecl, ...]:
    """Parse a Python file and return its classes."""
    return parse_source(read_source(path), display_path or str(path))
