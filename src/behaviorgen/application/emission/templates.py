"""C# source templates and the fragment builder.

Templates use string.Template ($name) so C# braces need no escaping.
The builder assembles a fragment from named slots:

    header -> namespace -> class open -> fields -> factories -> methods -> class close

Empty slots vanish without leaving blank lines behind, so output only
depends on slot contents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from string import Template

INDENT = "    "

HEADER = Template(
    """\
// <auto-generated>
//     Generated by behaviorgen from $artifact. Do not edit.
// </auto-generated>"""
)

NAMESPACE = Template("namespace $namespace;")

CLASS_OPEN = Template(
    """\
public partial class $container
{"""
)

CLASS_CLOSE = "}"

FACTORY = Template(
    """\
    private $handler Get$handler()
    {
        return ($params) => $dispatch(SignalName.$event$arguments);
    }"""
)

BUILTIN_BINDING = Template(
    """\
        if ($constant.Equals(signal))
        {
            $member $operator ($params) => $dispatch($constant$arguments);
        }"""
)

DISCOVERED_BINDING = Template(
    """\
        if (SignalName.$event.Equals(signal))
        {
            $event $operator Get$handler();
        }"""
)

SIGNAL_METHOD = Template(
    """\
    private void $method(Godot.StringName signal)
    {
$blocks
    }"""
)

LOOKUP_TABLE = Template(
    """\
    public static readonly System.Collections.Generic.Dictionary<$key_type, $value_type> $name = new()
    {
$entries
    };"""
)

TABLE_ENTRY = Template("        { $key, $value },")


def forwarded_arguments(parameters: tuple[str, ...]) -> str:
    """Arguments appended after the signal name: ", a, b" or ""."""
    if not parameters:
        return ""
    return ", " + ", ".join(parameters)


def csharp_string(value: str) -> str:
    """Quote value as a C# string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass
class FragmentBuilder:
    """Builder over the named slots of one generated fragment.

    Attributes:
        artifact_id: Source artifact the fragment belongs to
        namespace: Target namespace ("" = global, no namespace line)
        container: Partial class name
    """

    artifact_id: str
    namespace: str
    container: str
    _fields: list[str] = field(default_factory=list)
    _factories: list[str] = field(default_factory=list)
    _methods: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.artifact_id:
            raise ValueError("artifact_id must not be empty")
        if not self.container:
            raise ValueError("container must not be empty")
        if self.namespace is None:
            raise TypeError("namespace must not be None")

    def add_field(self, text: str) -> FragmentBuilder:
        """Append a member to the fields slot."""
        self._fields.append(text)
        return self

    def add_factory(self, text: str) -> FragmentBuilder:
        """Append a member to the factory-method slot."""
        self._factories.append(text)
        return self

    def add_method(self, text: str) -> FragmentBuilder:
        """Append a member to the methods slot."""
        self._methods.append(text)
        return self

    def build(self) -> str:
        """Render the fragment text. Ends with exactly one newline."""
        parts = [HEADER.substitute(artifact=self.artifact_id)]
        if self.namespace:
            parts.append(NAMESPACE.substitute(namespace=self.namespace))

        members = [*self._fields, *self._factories, *self._methods]
        body = "\n\n".join(members)
        class_lines = [CLASS_OPEN.substitute(container=self.container)]
        if body:
            class_lines.append(body)
        class_lines.append(CLASS_CLOSE)
        parts.append("\n".join(class_lines))

        return "\n\n".join(parts) + "\n"
