"""Unit tests for domain entities."""

from uuid import uuid4

from domain.entities.post import Like, Post
from domain.entities.profile import Profile, ProfileFields, parse_skills
from domain.entities.user import User


class TestParseSkills:
    def test_trims_each_entry(self):
        assert parse_skills("node, react , go") == ["node", "react", "go"]

    def test_keeps_empty_entries(self):
        assert parse_skills("a,,b") == ["a", "", "b"]


class TestProfileFields:
    def test_present_skips_none_and_parses_skills(self):
        fields = ProfileFields(status="Dev", skills="a, b")

        assert fields.present() == {"status": "Dev", "skills": ["a", "b"]}


class TestProfileApply:
    def test_absent_fields_keep_stored_values(self):
        profile = Profile(user_id=uuid4(), company="Acme", bio="hi")

        profile.apply(ProfileFields(status="Dev"))

        assert profile.company == "Acme"
        assert profile.bio == "hi"
        assert profile.status == "Dev"

    def test_social_links_merge_per_platform(self):
        profile = Profile(user_id=uuid4(), social={"twitter": "t", "youtube": "y"})

        profile.apply(ProfileFields(social={"youtube": "y2", "linkedin": "l"}))

        assert profile.social == {"twitter": "t", "youtube": "y2", "linkedin": "l"}


class TestUser:
    def test_email_is_normalized(self):
        assert User(name="Ann", email=" A@X.Com ", password_hash="h").email == "a@x.com"


class TestPost:
    def test_ownership(self):
        owner, other = uuid4(), uuid4()
        post = Post(user_id=owner, text="hello", likes=[Like(user_id=other)])

        assert post.is_owned_by(owner)
        assert not post.is_owned_by(other)
