"""tree-sitter C# parser adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import tree_sitter
import tree_sitter_c_sharp

from behaviorgen.domain.exceptions.parsing import ParsingError
from behaviorgen.infrastructure.analyzers.base import count_errors

if TYPE_CHECKING:
    from behaviorgen.domain.model.source_artifact import SourceArtifact

CSHARP_LANGUAGE = tree_sitter.Language(tree_sitter_c_sharp.language())


@dataclass(frozen=True, slots=True)
class ParsedArtifact:
    """Syntax tree of one artifact.

    Attributes:
        artifact: Parsed artifact
        tree: tree-sitter Tree
        error_count: ERROR/MISSING nodes in the tree
    """

    artifact: SourceArtifact
    tree: tree_sitter.Tree
    error_count: int

    @property
    def root(self) -> tree_sitter.Node:
        """Root (compilation_unit) node."""
        return self.tree.root_node


class CSharpParser:
    """Parses C# source with tree-sitter.

    A fresh tree_sitter.Parser per call: parsers are not shared between
    threads, the Language is.
    """

    def parse(self, artifact: SourceArtifact) -> ParsedArtifact:
        """Parse artifact into a syntax tree.

        tree-sitter is error tolerant: syntax errors yield ERROR nodes,
        not exceptions.

        Raises:
            ParsingError: If tree-sitter cannot produce a tree
        """
        if artifact is None:
            raise TypeError("artifact must not be None")

        parser = tree_sitter.Parser(CSHARP_LANGUAGE)
        tree = parser.parse(artifact.content.encode("utf-8"))
        if tree is None:
            raise ParsingError(artifact.path, "parser returned no tree")

        return ParsedArtifact(
            artifact=artifact,
            tree=tree,
            error_count=count_errors(tree.root_node),
        )
