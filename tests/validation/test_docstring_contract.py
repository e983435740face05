"""AST-level validation of the repository docstring conventions."""

from __future__ import annotations

import ast
import unittest
from collections.abc import Iterator
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
SCAN_ROOTS = ("src", "examples", "tests", "scripts")
IGNORED_PARAM_NAMES = {"self", "cls"}

CallableNode = ast.FunctionDef | ast.AsyncFunctionDef


def _has_section(docstring: str, section: str) -> bool:
    """Check whether a docstring contains a Google-style section header.

    Args:
        docstring: Full docstring text.
        section: Section name without trailing colon.

    Returns:
        ``True`` if a line consists of exactly ``section:``.
    """
    target = f"{section}:"
    return any(line.strip() == target for line in docstring.splitlines())


def _takes_arguments(node: CallableNode) -> bool:
    """Detect parameters other than ``self``/``cls``.

    Args:
        node: Function or method node.

    Returns:
        ``True`` when at least one documented parameter is expected.
    """
    arguments = node.args
    names = [arg.arg for arg in (*arguments.posonlyargs, *arguments.args, *arguments.kwonlyargs)]
    if arguments.vararg is not None:
        names.append(arguments.vararg.arg)
    if arguments.kwarg is not None:
        names.append(arguments.kwarg.arg)
    return any(name not in IGNORED_PARAM_NAMES for name in names)


def _returns_value(node: CallableNode) -> bool:
    """Check for a return annotation other than ``None``.

    Args:
        node: Function or method node.

    Returns:
        ``True`` if the callable is annotated to return a value.
    """
    annotation = node.returns
    if annotation is None:
        return False
    if isinstance(annotation, ast.Name) and annotation.id == "None":
        return False
    return not (isinstance(annotation, ast.Constant) and annotation.value is None)


def _raises_explicitly(node: CallableNode) -> bool:
    """Check for a ``raise`` statement with an exception in the callable body.

    Args:
        node: Function or method node.

    Returns:
        ``True`` if the body raises a new exception; bare re-raises and
        ``raise SystemExit`` are ignored.
    """
    for child in ast.walk(node):
        if not isinstance(child, ast.Raise) or child.exc is None:
            continue
        target = child.exc.func if isinstance(child.exc, ast.Call) else child.exc
        if isinstance(target, ast.Name) and target.id == "SystemExit":
            continue
        return True
    return False


def _iter_callables(tree: ast.Module) -> Iterator[tuple[str, CallableNode | ast.ClassDef]]:
    """Yield top-level classes, functions and methods with qualified names.

    Args:
        tree: Parsed module.

    Returns:
        Iterator of ``(qualified_name, node)`` pairs.
    """
    for node in tree.body:
        if isinstance(node, ast.ClassDef):
            yield node.name, node
            for member in node.body:
                if isinstance(member, (ast.FunctionDef, ast.AsyncFunctionDef)):
                    yield f"{node.name}.{member.name}", member
        elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            yield node.name, node


def _violations(path: Path, tree: ast.Module) -> list[str]:
    """Collect docstring violations from one module.

    Args:
        path: Repository-relative module path.
        tree: Parsed module.

    Returns:
        Human-readable violation messages.
    """
    found: list[str] = []
    for name, node in _iter_callables(tree):
        where = f"{path}:{node.lineno}"
        doc = ast.get_docstring(node)
        if doc is None:
            found.append(f"{where} missing docstring for `{name}`")
            continue
        if isinstance(node, ast.ClassDef):
            continue
        if _takes_arguments(node) and not _has_section(doc, "Args"):
            found.append(f"{where} missing Args for `{name}`")
        if _returns_value(node) and not _has_section(doc, "Returns"):
            found.append(f"{where} missing Returns for `{name}`")
        if _raises_explicitly(node) and not _has_section(doc, "Raises"):
            found.append(f"{where} missing Raises for `{name}`")
    return found


class DocstringContractTests(unittest.TestCase):
    """Validate docstring presence and Google-style sections repo-wide."""

    def test_docstring_contracts(self) -> None:
        """Require summaries plus Args/Returns/Raises where signatures need them."""
        violations: list[str] = []
        for root_name in SCAN_ROOTS:
            root = REPO_ROOT / root_name
            if not root.exists():
                continue
            for path in sorted(root.rglob("*.py")):
                tree = ast.parse(path.read_text(encoding="utf-8"))
                violations.extend(_violations(path.relative_to(REPO_ROOT), tree))

        if violations:
            formatted = "\n".join(f"- {item}" for item in violations)
            self.fail(f"Docstring contract violations:\n{formatted}")

    def test_raise_detection(self) -> None:
        """Flag raising callables and ignore re-raises and ``SystemExit``."""
        tree = ast.parse(
            "def a():\n    raise ValueError('x')\n"
            "def b():\n    try:\n        pass\n    except OSError:\n        raise\n"
            "def c():\n    raise SystemExit(1)\n"
        )
        flags = {node.name: _raises_explicitly(node) for node in tree.body}
        self.assertEqual(flags, {"a": True, "b": False, "c": False})


if __name__ == "__main__":
    unittest.main()
