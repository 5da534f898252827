"""
Unit tests for the JVM descriptor parser
"""
import pytest
from profbuilder.task.fixer.signature_parser import (
    MAX_NESTING_DEPTH,
    SignatureParser,
    fixMethodParameters,
    parseMethodTypeSignatureWithReturn,
    prettyPrintSignature,
)


class TestParseFieldType:
    """Test single field type descriptors"""

    @pytest.mark.parametrize("descriptor,expected", [
        ("B", "byte"),
        ("C", "char"),
        ("D", "double"),
        ("F", "float"),
        ("I", "int"),
        ("J", "long"),
        ("S", "short"),
        ("Z", "boolean"),
        ("V", "void"),
    ])
    def test_primitive_types(self, descriptor, expected):
        """Test every primitive tag"""
        parser = SignatureParser(descriptor)
        assert parser.parseFieldType() == expected
        assert parser.atEnd()

    def test_reference_type(self):
        """Test a reference type consumes up to and including ';'"""
        parser = SignatureParser("Ljava/lang/String;I")
        assert parser.parseFieldType() == "java/lang/String"
        assert parser.getPos() == len("Ljava/lang/String;")
        assert parser.parseFieldType() == "int"

    def test_nested_arrays(self):
        """Test multi-dimensional arrays"""
        parser = SignatureParser("[[J")
        assert parser.parseFieldType() == "long[][]"

    def test_unknown_tag(self):
        """Test an unknown tag yields a placeholder and advances"""
        parser = SignatureParser("XI")
        assert parser.parseFieldType() == "<error: unknown type>"
        assert parser.parseFieldType() == "int"

    def test_end_of_buffer(self):
        """Test parsing past the end yields a placeholder"""
        parser = SignatureParser("")
        assert parser.parseFieldType() == "<error: end of buffer reached>"

    def test_unterminated_reference(self):
        """Test a reference type without ';' consumes the rest"""
        parser = SignatureParser("Ljava/lang/String")
        assert parser.parseFieldType() == "<error: end of string reached>"
        assert parser.atEnd()

    def test_array_at_end_of_buffer(self):
        """Test an array tag with no element type"""
        parser = SignatureParser("[")
        assert parser.parseFieldType() == "<error: end of buffer reached>[]"

    def test_deeply_nested_arrays(self):
        """Test absurd array nesting yields a placeholder instead of overflowing"""
        parser = SignatureParser("[" * 5000 + "I")
        result = parser.parseFieldType()
        assert result.startswith("<error: unknown type>")
        assert result.count("[]") == MAX_NESTING_DEPTH
        assert parser.atEnd()

    def test_nesting_limit_not_reached(self):
        """Test arrays just under the nesting limit still parse"""
        parser = SignatureParser("[" * MAX_NESTING_DEPTH + "I")
        assert parser.parseFieldType() == "int" + "[]" * MAX_NESTING_DEPTH


class TestParseMethodTypeSignature:
    """Test method descriptors"""

    def test_no_arguments(self):
        """Test an empty argument list"""
        assert SignatureParser("()V").parseMethodTypeSignature() == "()"

    def test_arguments_joined(self):
        """Test arguments are joined with ', '"""
        parser = SignatureParser("(IJLjava/lang/Object;)V")
        assert parser.parseMethodTypeSignature() == "(int, long, java/lang/Object)"
        assert parser.getPos() == len("(IJLjava/lang/Object;)")

    def test_not_a_method(self):
        """Test input not starting with '(' yields an empty string"""
        assert SignatureParser("I").parseMethodTypeSignature() == ""
        assert SignatureParser("").parseMethodTypeSignature() == ""

    def test_missing_closing_paren(self):
        """Test a missing ')' appends a diagnostic suffix"""
        result = SignatureParser("(IJ").parseMethodTypeSignature()
        assert result == "(int, long <Method Signature Error: no ')'>"

    def test_with_return(self):
        """Test the return type is printed in front"""
        result = parseMethodTypeSignatureWithReturn("(I[Ljava.lang.String;)V")
        assert result == "void (int, java.lang.String[])"

    def test_with_return_missing_paren(self):
        """Test a missing ')' drops the return type"""
        result = parseMethodTypeSignatureWithReturn("(I")
        assert result == "(int <Method Signature Error: no ')'>"

    def test_with_return_missing_return_type(self):
        """Test a missing return type yields a placeholder"""
        assert parseMethodTypeSignatureWithReturn("(I)") == "<error: end of buffer reached> (int)"

    def test_nested_method_type(self):
        """Test a method type used as an argument"""
        result = SignatureParser("((J)ZI)V").parseMethodTypeSignature()
        assert result == "(boolean (long), int)"

    def test_deeply_nested_method_types(self):
        """Test absurd method type nesting yields a placeholder instead of overflowing"""
        result = parseMethodTypeSignatureWithReturn("(" * 5000)
        assert "<error: unknown type>" in result
        assert prettyPrintSignature("(" * 5000).count("<error: unknown type>") == 1


class TestFixMethodParameters:
    """Test descriptor normalization"""

    def test_fix_method_parameters(self):
        """Test slashes become dots and the arguments are pretty-printed"""
        assert fixMethodParameters("(I[Ljava/lang/String;)V") == "(int, java.lang.String[])"

    def test_full_form_after_normalization(self):
        """Test the full pretty form of a normalized descriptor"""
        normalized = "(I[Ljava/lang/String;)V".replace('/', '.')
        assert parseMethodTypeSignatureWithReturn(normalized) == "void (int, java.lang.String[])"

    def test_non_method_unchanged(self):
        """Test non-method descriptors are left alone"""
        assert fixMethodParameters("Ljava/lang/String;") == "Ljava/lang/String;"
        assert fixMethodParameters("") == ""
        assert fixMethodParameters(None) is None

    def test_pretty_print_signature(self):
        """Test pretty printing a field descriptor"""
        assert prettyPrintSignature("[Ljava/util/List;") == "java.util.List[]"
        assert prettyPrintSignature("Z") == "boolean"
