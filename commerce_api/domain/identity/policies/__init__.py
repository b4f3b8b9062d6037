"""Identity policies: rules that are not owned by a single field."""

from .birth_date_in_password import BirthDateInPasswordPolicy, birth_date_in_password_policy
from .name_masking import grapheme_clusters, mask_name, user_perceived_length

__all__ = [
    "BirthDateInPasswordPolicy",
    "birth_date_in_password_policy",
    "grapheme_clusters",
    "mask_name",
    "user_perceived_length",
]
