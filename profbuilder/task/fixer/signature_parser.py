'''
module signature parser
parser and pretty printer for JVM type descriptors
'''

from typing import Optional

PRIMITIVE_TYPES = {
    'B': "byte",
    'C': "char",
    'D': "double",
    'F': "float",
    'I': "int",
    'J': "long",
    'S': "short",
    'Z': "boolean",
    'V': "void",
}

END_OF_BUFFER_ERROR = "<error: end of buffer reached>"
END_OF_STRING_ERROR = "<error: end of string reached>"
UNKNOWN_TYPE_ERROR = "<error: unknown type>"
MISSING_PAREN_ERROR = " <Method Signature Error: no ')'>"

# Deepest array or method type nesting parsed before giving up.
MAX_NESTING_DEPTH = 100

'''
@class SignatureParser
Recursive-descent parser over one descriptor buffer
'''


class SignatureParser:
    """
    SignatureParser pretty-prints JVM field and method descriptors.

    The parser owns a cursor into its buffer; every parse method consumes
    the characters it recognizes and advances the cursor. Malformed input
    never raises: the offending part is rendered as an "<error: ...>"
    placeholder and parsing continues.

    Attributes:
        m_buffer: Descriptor text being parsed
        m_pos: Index of the next unread character
        m_depth: Current array and method type nesting depth
    """

    def __init__(self, buffer: str, pos: int = 0) -> None:
        """
        Initialize a SignatureParser.

        Args:
            buffer: Descriptor text, e.g. "(I[Ljava/lang/String;)V"
            pos: Starting cursor position
        """
        self.m_buffer: str = buffer
        self.m_pos: int = pos
        self.m_depth: int = 0

    def getPos(self) -> int:
        """Get the cursor position."""
        return self.m_pos

    def atEnd(self) -> bool:
        """Check whether the whole buffer has been consumed."""
        return self.m_pos >= len(self.m_buffer)

    def parseFieldType(self) -> str:
        """
        Parse one field type descriptor.

        Returns:
            Pretty-printed type, e.g. "int", "java/lang/String[]"
        """
        if self.m_pos >= len(self.m_buffer):
            return END_OF_BUFFER_ERROR

        tag = self.m_buffer[self.m_pos]
        self.m_pos += 1

        if tag in PRIMITIVE_TYPES:
            return PRIMITIVE_TYPES[tag]

        if tag == 'L':
            end = self.m_buffer.find(';', self.m_pos)
            if end < 0:
                self.m_pos = len(self.m_buffer)
                return END_OF_STRING_ERROR
            name = self.m_buffer[self.m_pos:end]
            self.m_pos = end + 1
            return name

        if tag == '[' or tag == '(':
            if self.m_depth >= MAX_NESTING_DEPTH:
                self.m_pos = len(self.m_buffer)
                return UNKNOWN_TYPE_ERROR
            self.m_depth += 1
            try:
                if tag == '[':
                    return self.parseFieldType() + "[]"
                # Method types start back at the '('.
                self.m_pos -= 1
                return self.parseMethodTypeSignatureWithReturn()
            finally:
                self.m_depth -= 1

        return UNKNOWN_TYPE_ERROR

    def _at_signature_end(self) -> bool:
        return self.m_pos >= len(self.m_buffer) or self.m_buffer[self.m_pos] == ')'

    def parseMethodTypeSignature(self) -> str:
        """
        Parse the argument list of a method descriptor.

        Returns:
            "(arg1, arg2)" form, the argument text followed by a diagnostic
            suffix if ')' is missing, or "" if the cursor is not at '('
        """
        if self.m_pos >= len(self.m_buffer) or self.m_buffer[self.m_pos] != '(':
            return ""

        self.m_pos += 1
        parts = ["("]
        while not self._at_signature_end():
            parts.append(self.parseFieldType())
            if not self._at_signature_end():
                parts.append(", ")

        if self.m_pos < len(self.m_buffer):
            self.m_pos += 1
            parts.append(")")
        else:
            parts.append(MISSING_PAREN_ERROR)
        return "".join(parts)

    def parseMethodTypeSignatureWithReturn(self) -> str:
        """
        Parse a full method descriptor including its return type.

        Returns:
            "<return> (<args>)" form; the bare argument text if ')' is
            missing; "" if the cursor is not at '('
        """
        arguments = self.parseMethodTypeSignature()
        if not arguments or not arguments.endswith(")"):
            return arguments

        return self.parseFieldType() + " " + arguments


def fixPath(text: str) -> str:
    """Replace package separators '/' by '.'."""
    return text.replace('/', '.')


def parseMethodTypeSignatureWithReturn(signature: str) -> str:
    """Pretty-print a full method descriptor, e.g. "void (int, long)"."""
    return SignatureParser(signature).parseMethodTypeSignatureWithReturn()


def prettyPrintSignature(signature: str) -> str:
    """
    Pretty-print one field type descriptor with dotted package names.

    Args:
        signature: Field descriptor, e.g. "[Ljava/util/List;"

    Returns:
        Pretty form, e.g. "java.util.List[]"
    """
    return fixPath(SignatureParser(signature).parseFieldType())


def fixMethodParameters(signature: Optional[str]) -> Optional[str]:
    """
    Normalize a method descriptor into its pretty argument list.

    Descriptors not starting with '(' are returned unchanged. Otherwise
    package separators are normalized and the descriptor is replaced by its
    parsed argument list.

    Args:
        signature: Method descriptor, e.g. "(I[Ljava/lang/String;)V"

    Returns:
        Pretty argument list, e.g. "(int, java.lang.String[])"
    """
    if not signature or signature[0] != '(':
        return signature

    return SignatureParser(fixPath(signature)).parseMethodTypeSignature()
