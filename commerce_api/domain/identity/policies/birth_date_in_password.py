"""Cross-field rule: a password must not contain its owner's birth date."""

from commerce_api.domain.common.result import Failure, Result, Success
from commerce_api.domain.identity.exceptions import PasswordContainsBirthDateError
from commerce_api.domain.identity.value_objects.birth_date import BirthDate
from commerce_api.domain.identity.value_objects.password import RawPassword


class BirthDateInPasswordPolicy:
    """
    Reject passwords that contain the birth date as YYYYMMDD, YYMMDD or MMDD.

    Runs after both fields passed their own format checks and before
    hashing. On password change it is checked against the account's stored
    birth date.
    """

    def check(
        self, password: RawPassword, birth_date: BirthDate
    ) -> Result[RawPassword, PasswordContainsBirthDateError]:
        for encoding in birth_date.encodings():
            if encoding in password.value:
                return Failure(PasswordContainsBirthDateError())
        return Success(password)


birth_date_in_password_policy = BirthDateInPasswordPolicy()
