"""Tests for stored definition encoding and Flat/Rich decoding."""

import json
import unittest

from domain.model.errors import SerializationError
from domain.model.word import (
    Definition,
    FlatDefinition,
    Meaning,
    RichDefinition,
    StoredWord,
    decode_definition,
    encode_meanings,
    first_definition,
)


def _hello_meanings() -> list[Meaning]:
    return [
        Meaning(
            part_of_speech="noun",
            definitions=[
                Definition(text='"Hello!" or an equivalent greeting.', example=None),
            ],
        ),
        Meaning(
            part_of_speech="verb",
            definitions=[
                Definition(text="To greet with \"hello\".", example="She helloed me across the street."),
                Definition(text="To call.", example=None),
            ],
        ),
    ]


class TestEncodeMeanings(unittest.TestCase):
    """Test Rich serialization."""

    def test_wire_shape(self):
        """Test encoded JSON uses partOfSpeech/definitions/definition/example keys."""
        data = json.loads(encode_meanings(_hello_meanings()))

        self.assertEqual(len(data), 2)
        self.assertEqual(data[0]["partOfSpeech"], "noun")
        self.assertEqual(data[1]["definitions"][0], {
            "definition": "To greet with \"hello\".",
            "example": "She helloed me across the street.",
        })

    def test_missing_example_is_null(self):
        """Test absent examples are written as null, not dropped."""
        data = json.loads(encode_meanings(_hello_meanings()))
        self.assertIn("example", data[0]["definitions"][0])
        self.assertIsNone(data[0]["definitions"][0]["example"])

    def test_non_ascii_kept_readable(self):
        """Test non-ASCII text is stored as-is rather than \\u escapes."""
        encoded = encode_meanings([Meaning("noun", [Definition("café au lait")])])
        self.assertIn("café", encoded)

    def test_unencodable_value_raises_serialization_error(self):
        """Test encoder failures surface as SerializationError."""
        broken = [Meaning("noun", [Definition(text=object())])]
        with self.assertRaises(SerializationError):
            encode_meanings(broken)


class TestDecodeDefinition(unittest.TestCase):
    """Test lazy decoding of stored definition text."""

    def test_rich_decodes_to_same_meanings(self):
        """Test Rich text decodes back to equal meanings."""
        meanings = _hello_meanings()
        decoded = decode_definition(encode_meanings(meanings))

        self.assertIsInstance(decoded, RichDefinition)
        self.assertEqual(decoded.meanings, meanings)

    def test_plain_text_is_flat(self):
        """Test a plain definition reads back as Flat."""
        self.assertEqual(decode_definition("a greeting"), FlatDefinition(text="a greeting"))

    def test_json_scalar_is_flat(self):
        """Test JSON that is not a list is treated as Flat text."""
        self.assertEqual(decode_definition("42"), FlatDefinition(text="42"))
        self.assertEqual(decode_definition('"quoted"'), FlatDefinition(text='"quoted"'))

    def test_empty_list_is_flat(self):
        """Test an empty JSON list is not a Rich value."""
        self.assertEqual(decode_definition("[]"), FlatDefinition(text="[]"))

    def test_wrong_shape_is_flat(self):
        """Test JSON lists of the wrong shape fall back to Flat."""
        for text in (
            "[1, 2]",
            '[{"partOfSpeech": "noun"}]',
            '[{"partOfSpeech": "noun", "definitions": [{"example": "x"}]}]',
            '[{"partOfSpeech": 3, "definitions": []}]',
            '[{"partOfSpeech": "noun", "definitions": [{"definition": "x", "example": 5}]}]',
        ):
            with self.subTest(text=text):
                self.assertIsInstance(decode_definition(text), FlatDefinition)

    def test_deeply_nested_brackets_are_flat(self):
        """Test text nested past the JSON parser's depth limit reads back as Flat."""
        text = "[" * 100000

        decoded = decode_definition(text)

        self.assertEqual(decoded, FlatDefinition(text=text))
        self.assertEqual(StoredWord(id=1, word="deep", definition=text).summary, text)

    def test_rich_without_example_key(self):
        """Test definitions missing the example key decode with example None."""
        decoded = decode_definition('[{"partOfSpeech": "noun", "definitions": [{"definition": "x"}]}]')
        self.assertIsInstance(decoded, RichDefinition)
        self.assertIsNone(decoded.meanings[0].definitions[0].example)


class TestFirstDefinition(unittest.TestCase):
    """Test Flat extraction from meanings."""

    def test_first_of_first_group(self):
        self.assertEqual(first_definition(_hello_meanings()), '"Hello!" or an equivalent greeting.')

    def test_skips_empty_groups(self):
        meanings = [Meaning("noun", []), Meaning("verb", [Definition("to run")])]
        self.assertEqual(first_definition(meanings), "to run")

    def test_none_when_nothing(self):
        self.assertIsNone(first_definition([]))


class TestStoredWord(unittest.TestCase):
    """Test StoredWord views over the definition column."""

    def test_flat_summary(self):
        stored = StoredWord(id=1, word="hello", definition="a greeting")
        self.assertIsInstance(stored.content, FlatDefinition)
        self.assertEqual(stored.summary, "a greeting")

    def test_rich_summary(self):
        stored = StoredWord(id=2, word="hello", definition=encode_meanings(_hello_meanings()))
        self.assertIsInstance(stored.content, RichDefinition)
        self.assertEqual(stored.summary, '"Hello!" or an equivalent greeting.')


if __name__ == '__main__':
    unittest.main()
