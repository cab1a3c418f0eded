from models import Content
from services.content_service import ContentService
from services.results import Outcome


def add_item(service, owner, title="t"):
    return service.create(
        owner_id=owner.id, link="https://x.com/1", type="twitter", title=title
    ).value


class TestContentCreate:
    def test_create_for_owner(self, session, make_user):
        user = make_user("alice")

        result = ContentService(session).create(
            owner_id=user.id, link="https://x.com/1", type="twitter", title="t"
        )

        assert result.ok
        assert result.value.user_id == user.id
        assert result.value.tags == []

    def test_create_for_unknown_owner(self, session):
        result = ContentService(session).create(
            owner_id="a" * 24, link="https://x.com/1", type="twitter", title="t"
        )

        assert result.outcome is Outcome.NOT_FOUND
        assert Content.query.count() == 0


class TestContentList:
    def test_lists_only_own_content(self, session, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        service = ContentService(session)
        add_item(service, alice, "first")
        add_item(service, alice, "second")
        add_item(service, bob, "bobs")

        titles = [item.title for item in service.list_for_owner(alice.id)]

        assert sorted(titles) == ["first", "second"]

    def test_empty_list(self, session, make_user):
        user = make_user("alice")
        assert ContentService(session).list_for_owner(user.id) == []


class TestContentDelete:
    def test_delete_own_content(self, session, make_user):
        user = make_user("alice")
        service = ContentService(session)
        item = add_item(service, user)

        result = service.delete_owned(item.id, user.id)

        assert result.ok
        assert Content.query.count() == 0

    def test_cannot_delete_someone_elses_content(self, session, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        service = ContentService(session)
        item = add_item(service, bob)

        result = service.delete_owned(item.id, alice.id)

        assert result.outcome is Outcome.NOT_FOUND
        assert session.get(Content, item.id) is not None

    def test_delete_missing_content(self, session, make_user):
        user = make_user("alice")

        result = ContentService(session).delete_owned("b" * 24, user.id)

        assert result.outcome is Outcome.NOT_FOUND

    def test_delete_accepts_uppercase_id(self, session, make_user):
        user = make_user("alice")
        service = ContentService(session)
        item = add_item(service, user)

        result = service.delete_owned(item.id.upper(), user.id)

        assert result.ok
