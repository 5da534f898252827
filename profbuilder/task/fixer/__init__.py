from .signature_parser import (
    SignatureParser,
    fixMethodParameters,
    parseMethodTypeSignatureWithReturn,
    prettyPrintSignature,
)
from .name_simplifier import (
    simplifyDynamicClassName,
    simplifyFunctionName,
    simplifyLambdaName,
    simplifyReflectionMethodName,
)

__all__ = [
    "SignatureParser", "fixMethodParameters", "parseMethodTypeSignatureWithReturn",
    "prettyPrintSignature", "simplifyDynamicClassName", "simplifyFunctionName",
    "simplifyLambdaName", "simplifyReflectionMethodName",
]
