from dataclasses import dataclass
from string import digits
from typing import TYPE_CHECKING, Any

from .ArnError import InvalidAccountId
from .IdentifierLike import WILDCARD_CHARS, IdentifierLike

if TYPE_CHECKING:
    from ..arn import ResourceName

ACCOUNT_ID_LENGTH = 12

# dono das políticas gerenciadas pela AWS, ex.: arn:aws:iam::aws:policy/ReadOnlyAccess
AWS_MANAGED_OWNER = "aws"


@dataclass(frozen=True)
class AccountIdentifier(IdentifierLike):
    """
    The account-id field: exactly 12 digits, or up to 12 digits and
    wildcards with at least one wildcard present.
    """

    value: str

    error = InvalidAccountId

    @staticmethod
    def is_valid(s: Any) -> bool:
        if not isinstance(s, str) or not s:
            return False
        if s == AWS_MANAGED_OWNER:
            return True
        if len(s) == ACCOUNT_ID_LENGTH and all(c in digits for c in s):
            return True
        # 9 dígitos sem curinga continua inválido
        return (
            len(s) <= ACCOUNT_ID_LENGTH
            and all(c in digits or c in WILDCARD_CHARS for c in s)
            and any(c in WILDCARD_CHARS for c in s)
        )

    def root_arn(self) -> "ResourceName":
        """
        The account root principal, `arn:aws:iam::{account}:root`.
        """
        from ..arn import ResourceName

        return ResourceName.from_account(self)
