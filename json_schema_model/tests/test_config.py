from unittest import TestCase

from json_schema_model import CodecConfig, SchemaParser


class TestCodecConfig(TestCase):
    """Test CodecConfig loading"""

    def test_defaults(self):
        config = CodecConfig()
        self.assertEqual(config.max_depth, 64)
        self.assertEqual(config.indent, 2)
        self.assertFalse(config.sort_keys)

    def test_from_dict_ignores_unknown_keys(self):
        config = CodecConfig.from_dict({"max_depth": 8, "indent": None, "language": "cs"})
        self.assertEqual(config.max_depth, 8)
        self.assertIsNone(config.indent)
        self.assertFalse(hasattr(config, "language"))

    def test_to_dict_roundtrip(self):
        config = CodecConfig(max_depth=3, indent=4, sort_keys=True)
        self.assertEqual(CodecConfig.from_dict(config.to_dict()), config)

    def test_parser_uses_default_config(self):
        self.assertEqual(SchemaParser().config, CodecConfig())

    def test_from_dict_rejects_wrong_types(self):
        for options in ({"max_depth": "x"}, {"max_depth": -1}, {"indent": True}, {"sort_keys": "yes"}):
            with self.subTest(options=options):
                with self.assertRaises(ValueError):
                    CodecConfig.from_dict(options)

    def test_from_dict_requires_a_mapping(self):
        with self.assertRaises(ValueError):
            CodecConfig.from_dict(["max_depth", 3])

    def test_from_dict_only_sets_options(self):
        config = CodecConfig.from_dict({"validate": None, "to_dict": 1})
        self.assertEqual(config, CodecConfig())
        config.validate()
