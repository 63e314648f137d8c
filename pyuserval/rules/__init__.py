"""The guard clauses applied to each user input field.

Each module defines the rules for one field together with the ordered tuple
the validator runs them in. Order is significant: the first failing rule is
the only one reported, and the presence rule always comes last so that a
missing value is never reported as a format or length problem.
"""
from .email import EMAIL_RULES
from .password import PASSWORD_RULES
from .username import USERNAME_RULES

__all__ = ["EMAIL_RULES", "PASSWORD_RULES", "USERNAME_RULES"]
