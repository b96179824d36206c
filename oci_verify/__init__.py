"""Sigstore image verification requests for the OCI host capability (v2)."""

from .models import (
    HostCallError,
    HostResponseError,
    KeylessInfo,
    KeylessPrefixInfo,
    SigstoreCertificateVerify,
    SigstoreGithubActionsVerify,
    SigstoreKeylessPrefixVerify,
    SigstoreKeylessVerifyExact,
    SigstorePubKeysVerify,
    VerificationResponse,
)
from .services import (
    V1,
    V2,
    Host,
    HostClient,
    HttpHostClient,
    verify,
    verify_certificate,
    verify_keyless_exact_match,
    verify_keyless_github_actions,
    verify_keyless_prefix_match,
    verify_pub_keys_image,
)

__version__ = "0.1.0"

__all__ = [
    "Host",
    "HostCallError",
    "HostClient",
    "HostResponseError",
    "HttpHostClient",
    "KeylessInfo",
    "KeylessPrefixInfo",
    "SigstoreCertificateVerify",
    "SigstoreGithubActionsVerify",
    "SigstoreKeylessPrefixVerify",
    "SigstoreKeylessVerifyExact",
    "SigstorePubKeysVerify",
    "V1",
    "V2",
    "VerificationResponse",
    "verify",
    "verify_certificate",
    "verify_keyless_exact_match",
    "verify_keyless_github_actions",
    "verify_keyless_prefix_match",
    "verify_pub_keys_image",
]
