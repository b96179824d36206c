# Data models package

from .signature import (
    HostCallError,
    HostResponseError,
    KeylessInfo,
    KeylessPrefixInfo,
    SigstoreCertificateVerify,
    SigstoreGithubActionsVerify,
    SigstoreKeylessPrefixVerify,
    SigstoreKeylessVerifyExact,
    SigstorePubKeysVerify,
    SigstoreVerifyRequest,
    VerificationRequest,
    VerificationResponse,
    parse_verification_request,
)

__all__ = [
    "HostCallError",
    "HostResponseError",
    "KeylessInfo",
    "KeylessPrefixInfo",
    "SigstoreCertificateVerify",
    "SigstoreGithubActionsVerify",
    "SigstoreKeylessPrefixVerify",
    "SigstoreKeylessVerifyExact",
    "SigstorePubKeysVerify",
    "SigstoreVerifyRequest",
    "VerificationRequest",
    "VerificationResponse",
    "parse_verification_request",
]
