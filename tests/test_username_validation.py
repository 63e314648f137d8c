import unittest

from pyuserval import create, create_validator
from pyuserval.core.errors import (
    InvalidUsernameFormatError,
    InvalidUsernameLengthError,
    UsernameError,
    UsernameIsNullError,
)


class TestUsernameValidation(unittest.TestCase):

    def setUp(self):
        self.validator = create().build()

    def test_valid_usernames(self):
        for username in ["abc", "john_doe-99", "A" * 25, "___", "-x-"]:
            with self.subTest(username=username):
                self.assertTrue(self.validator.validate_username(username))

    def test_too_short(self):
        with self.assertRaises(InvalidUsernameLengthError) as ctx:
            self.validator.validate_username("ab")
        self.assertEqual(ctx.exception.message, "Username is too short")

    def test_empty_username_is_too_short(self):
        """The pattern accepts an empty string, so the length rule reports it."""
        with self.assertRaises(InvalidUsernameLengthError) as ctx:
            self.validator.validate_username("")
        self.assertEqual(ctx.exception.message, "Username is too short")

    def test_too_long(self):
        with self.assertRaises(InvalidUsernameLengthError) as ctx:
            self.validator.validate_username("abcdefghijklmnopqrstuvwxyz")
        self.assertEqual(ctx.exception.message, "Username is too long")

    def test_invalid_format(self):
        with self.assertRaises(InvalidUsernameFormatError):
            self.validator.validate_username("bad name!")

    def test_format_is_checked_before_length(self):
        with self.assertRaises(InvalidUsernameFormatError):
            self.validator.validate_username("a!")
        with self.assertRaises(InvalidUsernameFormatError):
            self.validator.validate_username("x" * 30 + " ")

    def test_null_username(self):
        with self.assertRaises(UsernameIsNullError) as ctx:
            self.validator.validate_username(None)
        self.assertEqual(ctx.exception.kind, "UsernameIsNull")
        self.assertEqual(ctx.exception.field, "username")

    def test_errors_share_field_base_class(self):
        for username in [None, "ab", "bad name!"]:
            with self.subTest(username=username):
                with self.assertRaises(UsernameError):
                    self.validator.validate_username(username)

    def test_min_length_override(self):
        """Test that a raised minimum rejects a name the defaults accept."""
        self.assertTrue(self.validator.validate_username("abcd"))
        strict = create().with_username_min_length(5).build()
        with self.assertRaises(InvalidUsernameLengthError):
            strict.validate_username("abcd")
        self.assertTrue(strict.validate_username("abcde"))

    def test_pattern_and_max_length_override(self):
        validator = create_validator(username_pattern=r"^[a-z]*$", username_max_length=8)
        self.assertTrue(validator.validate_username("lowercase"[:8]))
        with self.assertRaises(InvalidUsernameFormatError):
            validator.validate_username("Upper")
        with self.assertRaises(InvalidUsernameLengthError):
            validator.validate_username("toolongname")

    def test_min_greater_than_max_is_accepted(self):
        validator = create().with_username_min_length(10).with_username_max_length(5).build()
        with self.assertRaises(InvalidUsernameLengthError) as ctx:
            validator.validate_username("abcdefg")
        self.assertEqual(ctx.exception.message, "Username is too short")
        with self.assertRaises(InvalidUsernameLengthError) as ctx:
            validator.validate_username("abcdefghijkl")
        self.assertEqual(ctx.exception.message, "Username is too long")

    def test_repeated_calls_give_same_result(self):
        for _ in range(2):
            self.assertTrue(self.validator.validate_username("alice"))
            with self.assertRaises(InvalidUsernameLengthError):
                self.validator.validate_username("ab")


if __name__ == '__main__':
    unittest.main()
