from unittest import TestCase

from json_schema_to_markdown.pipeline.config import MarkdownConfig
from json_schema_to_markdown.pipeline.sections import SectionEmitter
from json_schema_to_markdown.pipeline.type_graph import (
    ArrayType,
    ClassProperty,
    ClassType,
    EnumCase,
    EnumType,
    PrimitiveKind,
    PrimitiveType,
)

STRING = PrimitiveType(kind=PrimitiveKind.STRING)


def person_class(**property_overrides):
    person = ClassType(type_id="#")
    person.properties = [
        ClassProperty(name="name", json_name="name", type=STRING),
        ClassProperty(name="nickname", json_name="nickname", type=STRING, is_optional=True),
    ]
    for prop in person.properties:
        for k, v in property_overrides.get(prop.name, {}).items():
            setattr(prop, k, v)
    return person


def color_enum():
    return EnumType(
        type_id="#/definitions/color",
        cases=[EnumCase(name="Red", json_name="RED"), EnumCase(name="Green", json_name="GREEN")],
    )


class TestClassSections(TestCase):
    def setUp(self):
        self.emitter = SectionEmitter(MarkdownConfig())

    def _emit(self, c, names=None):
        names = names or {}
        return self.emitter.emit_class(c, "Person", names.__getitem__)

    def test_person_section(self):
        self.assertEqual(
            self._emit(person_class()),
            [
                "<a name='typedef-Person'></a>",
                "## `Person`",
                "",
                "**Properties:**",
                "",
                "* `name`: <code>string</code>",
                "* `nickname` (optional): <code>string</code>",
            ],
        )

    def test_type_description_follows_header(self):
        person = person_class()
        person.description = ["A person.", "Known by name."]
        lines = self._emit(person)
        self.assertEqual(lines[:7], ["<a name='typedef-Person'></a>", "## `Person`", "", "A person.", "Known by name.", "", "**Properties:**"])

    def test_property_description_is_indented_under_its_bullet(self):
        person = person_class(name={"description": ["Full name.", "", "Never empty."]})
        self.assertEqual(
            self._emit(person)[5:],
            [
                "* `name`: <code>string</code>",
                "",
                "    Full name.",
                "",
                "    Never empty.",
                "",
                "* `nickname` (optional): <code>string</code>",
            ],
        )

    def test_indentation_is_configurable(self):
        emitter = SectionEmitter(MarkdownConfig(indentation="  "))
        person = person_class(nickname={"description": ["Informal name."]})
        lines = emitter.emit_class(person, "Person", {}.__getitem__)
        self.assertEqual(lines[-3:], ["", "  Informal name.", ""])

    def test_one_bullet_per_property(self):
        person = ClassType(type_id="#")
        person.properties = [ClassProperty(name=f"p{i}", json_name=f"p{i}", type=STRING, is_optional=i % 2 == 1) for i in range(5)]
        bullets = [line for line in self._emit(person) if line.startswith("* ")]
        self.assertEqual(len(bullets), 5)
        self.assertEqual([" (optional)" in b for b in bullets], [False, True, False, True, False])

    def test_property_types_link_to_other_sections(self):
        address = ClassType(type_id="#/definitions/address")
        person = ClassType(type_id="#")
        person.properties = [ClassProperty(name="addresses", json_name="addresses", type=ArrayType(items=address))]
        lines = self._emit(person, {address: "Address"})
        self.assertIn("* `addresses`: <code><a href='#typedef-Address'>Address</a>[]</code>", lines)

    def test_class_without_properties(self):
        self.assertEqual(self._emit(ClassType(type_id="#"))[-2:], ["**Properties:**", ""])


class TestEnumSections(TestCase):
    def test_variants_use_wire_values(self):
        emitter = SectionEmitter(MarkdownConfig())
        self.assertEqual(
            emitter.emit_enum(color_enum(), "Color"),
            [
                "<a name='typedef-Color'></a>",
                "## `Color`",
                "",
                "**Variants:**",
                "",
                '* `"RED"`',
                '* `"GREEN"`',
            ],
        )

    def test_enum_description(self):
        emitter = SectionEmitter(MarkdownConfig())
        enum = color_enum()
        enum.description = ["Primary colors."]
        self.assertEqual(emitter.emit_enum(enum, "Color")[2:6], ["", "Primary colors.", "", "**Variants:**"])

    def test_legacy_fenced_block(self):
        emitter = SectionEmitter(MarkdownConfig(legacy_enum_blocks=True))
        with self.assertLogs("json_schema_to_markdown", level="WARNING"):
            lines = emitter.emit_enum(color_enum(), "Color")
        self.assertEqual(
            lines,
            [
                "<a name='typedef-Color'></a>",
                "## `Color`",
                "",
                "```",
                "export enum Color {",
                '    Red = "RED",',
                '    Green = "GREEN",',
                "}",
                "```",
            ],
        )


class TestBackticksInNames(TestCase):
    def test_enum_value_with_backtick(self):
        enum = EnumType(type_id="#/definitions/quote", cases=[EnumCase(name="AB", json_name="a`b")])
        lines = SectionEmitter(MarkdownConfig()).emit_enum(enum, "Quote")
        self.assertEqual(lines[-1], '* `` "a`b" ``')

    def test_property_name_with_backtick(self):
        c = ClassType(type_id="#")
        c.properties = [ClassProperty(name='"a`b"', json_name="a`b", type=STRING)]
        lines = SectionEmitter(MarkdownConfig()).emit_class(c, "Quote", {}.__getitem__)
        self.assertEqual(lines[-1], '* `` "a`b" ``: <code>string</code>')
