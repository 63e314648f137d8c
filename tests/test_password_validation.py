import unittest

from pyuserval import create
from pyuserval.core.errors import (
    InvalidPasswordError,
    InvalidPasswordFormatError,
    InvalidPasswordLengthError,
    NullPasswordError,
    PasswordError,
)


class TestPasswordValidation(unittest.TestCase):

    def setUp(self):
        self.validator = create().build()

    def test_valid_password(self):
        self.assertTrue(self.validator.validate_password("alice", "Secret1"))

    def test_allowed_special_characters(self):
        for password in ["€uro@#~1", "a_b.c,d&e%f", "123456", "x" * 20]:
            with self.subTest(password=password):
                self.assertTrue(self.validator.validate_password("alice", password))

    def test_password_equal_to_username(self):
        """The equality rule fires before the length rules, even for short passwords."""
        with self.assertRaises(InvalidPasswordError) as ctx:
            self.validator.validate_password("alice", "alice")
        self.assertEqual(ctx.exception.message, "Password should be different than username")
        with self.assertRaises(InvalidPasswordError):
            self.validator.validate_password("a" * 21, "a" * 21)

    def test_username_comparison_is_case_sensitive(self):
        self.assertTrue(self.validator.validate_password("Alice1", "alice1"))

    def test_no_username(self):
        self.assertTrue(self.validator.validate_password(None, "Secret1"))

    def test_too_short(self):
        with self.assertRaises(InvalidPasswordLengthError) as ctx:
            self.validator.validate_password("bob", "short")
        self.assertEqual(ctx.exception.message, "Password too short")

    def test_too_long(self):
        with self.assertRaises(InvalidPasswordLengthError) as ctx:
            self.validator.validate_password("bob", "abcdefghijklmnopqrstu")
        self.assertEqual(ctx.exception.message, "Password too long")

    def test_invalid_characters(self):
        with self.assertRaises(InvalidPasswordFormatError) as ctx:
            self.validator.validate_password("alice", "bad pwd")
        self.assertEqual(ctx.exception.message, "Invalid characters in password")

    def test_format_is_checked_before_equality(self):
        with self.assertRaises(InvalidPasswordFormatError):
            self.validator.validate_password("bad pwd", "bad pwd")

    def test_null_password(self):
        with self.assertRaises(NullPasswordError) as ctx:
            self.validator.validate_password("alice", None)
        self.assertEqual(ctx.exception.kind, "NullPassword")
        with self.assertRaises(NullPasswordError):
            self.validator.validate_password(None, None)

    def test_max_length_checked_before_min_length(self):
        validator = create().with_password_min_length(10).with_password_max_length(5).build()
        with self.assertRaises(InvalidPasswordLengthError) as ctx:
            validator.validate_password(None, "abcdefg")
        self.assertEqual(ctx.exception.message, "Password too long")
        with self.assertRaises(InvalidPasswordLengthError) as ctx:
            validator.validate_password(None, "abc")
        self.assertEqual(ctx.exception.message, "Password too short")

    def test_pattern_override(self):
        validator = create().with_password_pattern(r"^[A-Za-z0-9 ]*$").build()
        self.assertTrue(validator.validate_password("alice", "bad pwd"))
        with self.assertRaises(InvalidPasswordFormatError):
            validator.validate_password("alice", "Secret#1")

    def test_errors_share_field_base_class(self):
        for password in [None, "short", "bad pwd", "alice"]:
            with self.subTest(password=password):
                with self.assertRaises(PasswordError):
                    self.validator.validate_password("alice", password)

    def test_repeated_calls_give_same_result(self):
        for _ in range(2):
            self.assertTrue(self.validator.validate_password("alice", "Secret1"))
            with self.assertRaises(InvalidPasswordError):
                self.validator.validate_password("alice", "alice")


if __name__ == '__main__':
    unittest.main()
