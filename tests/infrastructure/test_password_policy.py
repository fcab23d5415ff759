"""Tests for the admin password generation policy."""

import json
import string

from rds_stack.configs.password_policy import PasswordPolicy


class TestPasswordPolicy:
    """Tests for PasswordPolicy."""

    def test_defaults(self):
        policy = PasswordPolicy()

        assert policy.length == 32
        assert policy.require_each_included_type is True
        assert policy.template == {"username": "admin"}
        assert policy.generate_key == "password"

    def test_exclusion_set_covers_connection_string_breakers(self):
        policy = PasswordPolicy()

        for char in ' %+~`#$&*()|[]{}:;<>?!\'/@"\\':
            assert char in policy.exclude_characters

    def test_allowed_special_excludes_every_configured_character(self):
        policy = PasswordPolicy()
        special = policy.allowed_special()

        assert special
        assert not set(special) & set(policy.exclude_characters)
        assert set(special) <= set(string.punctuation)
        assert sorted(special) == sorted(",-.=^_")

    def test_random_password_args_require_each_class(self):
        args = PasswordPolicy().random_password_args()

        assert args["length"] == 32
        assert args["special"] is True
        assert args["override_special"] == PasswordPolicy().allowed_special()
        assert args["min_lower"] == 1
        assert args["min_upper"] == 1
        assert args["min_numeric"] == 1
        assert args["min_special"] == 1

    def test_random_password_args_without_required_classes(self):
        args = PasswordPolicy(require_each_included_type=False).random_password_args()

        assert args["min_lower"] == args["min_upper"] == args["min_numeric"] == args["min_special"] == 0

    def test_all_punctuation_excluded_disables_special(self):
        args = PasswordPolicy(exclude_characters=string.punctuation).random_password_args()

        assert args["special"] is False
        assert args["override_special"] == ""
        assert args["min_special"] == 0

    def test_render_merges_template_and_fields(self):
        secret = json.loads(PasswordPolicy().render("s3cr3t-Value", host="db.local", port=3306))

        assert secret == {
            "username": "admin",
            "password": "s3cr3t-Value",
            "host": "db.local",
            "port": 3306,
        }

    def test_template_not_shared_between_instances(self):
        first = PasswordPolicy()
        first.template["extra"] = "x"

        assert "extra" not in PasswordPolicy().template
