import pytest

from db.errors import DatabaseConnectionError, StorageError, UniqueViolation
from models.partner import Partner
from services import notifications
from services.partner_service import PartnerFetchError, PartnerService

FORM = {
    "type": "ООО",
    "name": "Паркет 29",
    "ceo": "Иванов И.И.",
    "email": "info@parket29.ru",
    "phone": "89123456789",
    "address": "Москва",
    "rating": 7,
}


class StubRepo:
    def __init__(self, error=None, updated=True, partners=None):
        self.error = error
        self.updated = updated
        self.partners = partners or []
        self.calls = []

    def list_partners(self):
        self.calls.append(("list", None))
        if self.error:
            raise self.error
        return self.partners

    def create(self, data):
        self.calls.append(("create", data))
        if self.error:
            raise self.error
        return 1

    def update(self, data):
        self.calls.append(("update", data))
        if self.error:
            raise self.error
        return self.updated


def test_get_partners_returns_repository_rows():
    partners = [Partner(id=1, organization_type="ИП", name="Ремонт", discount=5)]
    assert PartnerService(StubRepo(partners=partners)).get_partners() == partners


def test_get_partners_empty():
    assert PartnerService(StubRepo()).get_partners() == []


def test_get_partners_failure_is_generic():
    service = PartnerService(StubRepo(error=DatabaseConnectionError("server closed")))
    with pytest.raises(PartnerFetchError, match="Failed to fetch partners"):
        service.get_partners()


def test_create_success_notice_and_payload():
    repo = StubRepo()
    notice = PartnerService(repo).create_partner({**FORM, "id": 17})

    assert not notice.is_error
    assert notice.message == notifications.MSG_PARTNER_CREATED
    _, data = repo.calls[0]
    assert data.id is None
    assert data.organization_type == "ООО"
    assert data.rating == 7


def test_create_duplicate_name_gets_specific_message():
    notice = PartnerService(StubRepo(error=UniqueViolation("dup"))).create_partner(FORM)
    assert notice.is_error
    assert notice.message == notifications.MSG_NAME_TAKEN
    assert notice.title == notifications.ERROR_TITLE


def test_create_other_error_gets_generic_message():
    notice = PartnerService(StubRepo(error=StorageError("null value"))).create_partner(FORM)
    assert notice.is_error
    assert notice.message == notifications.MSG_CREATE_FAILED


def test_update_success_notice():
    repo = StubRepo()
    notice = PartnerService(repo).update_partner({**FORM, "id": 3})
    assert notice.message == notifications.MSG_PARTNER_UPDATED
    assert repo.calls[0][1].id == 3


def test_update_unknown_id_is_silent_success(caplog):
    notice = PartnerService(StubRepo(updated=False)).update_partner({**FORM, "id": 404})
    assert not notice.is_error
    assert "404" in caplog.text


def test_update_duplicate_name_and_generic_failure():
    dup = PartnerService(StubRepo(error=UniqueViolation("dup"))).update_partner({**FORM, "id": 3})
    other = PartnerService(StubRepo(error=DatabaseConnectionError("gone"))).update_partner({**FORM, "id": 3})
    assert dup.message == notifications.MSG_NAME_TAKEN
    assert other.message == notifications.MSG_UPDATE_FAILED


def test_notice_str_includes_title():
    notice = notifications.failure(UniqueViolation("dup"), notifications.MSG_CREATE_FAILED)
    assert str(notice) == f"{notifications.ERROR_TITLE}: {notifications.MSG_NAME_TAKEN}"


def test_unconnected_database_is_reported_not_raised():
    from db.connection import Database
    from repositories.partner_repo import PartnerRepository

    service = PartnerService(PartnerRepository(Database("postgresql://nobody@localhost/none")))

    with pytest.raises(PartnerFetchError):
        service.get_partners()
    assert service.create_partner(FORM).message == notifications.MSG_CREATE_FAILED
    assert service.update_partner({**FORM, "id": 1}).message == notifications.MSG_UPDATE_FAILED
