"""Unit tests for registry record models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from rdapview.registry.enums import DesignatedContactType, RegistrarState, StatusValue
from rdapview.registry.models import RegistrarRecord
from tests.factories import ContactFactory, DomainFactory, HostFactory, RegistrarFactory

REQUEST_TIME = datetime(2024, 6, 1, tzinfo=UTC)


class TestEppResource:
    """Tests for shared resource behavior."""

    def test_not_deleted_without_deletion_time(self) -> None:
        assert not DomainFactory.create().is_deleted_at(REQUEST_TIME)

    def test_deleted_after_deletion_time(self) -> None:
        domain = DomainFactory.create(deletion_time=datetime(2024, 1, 1, tzinfo=UTC))
        assert domain.is_deleted_at(REQUEST_TIME)

    def test_future_deletion_not_yet_deleted(self) -> None:
        domain = DomainFactory.create(deletion_time=datetime(2025, 1, 1, tzinfo=UTC))
        assert not domain.is_deleted_at(REQUEST_TIME)

    def test_records_are_frozen(self) -> None:
        domain = DomainFactory.create()
        with pytest.raises(ValidationError):
            domain.repo_id = "other"  # type: ignore[misc]


class TestDomainRecord:
    """Tests for DomainRecord."""

    def test_pending_transfer_kept_before_expiration(self) -> None:
        domain = DomainFactory.create(
            status_values={StatusValue.PENDING_TRANSFER},
            pending_transfer_expiration_time=datetime(2025, 1, 1, tzinfo=UTC),
        )
        assert domain.status_values_at(REQUEST_TIME) == {StatusValue.PENDING_TRANSFER}

    def test_pending_transfer_dropped_after_expiration(self) -> None:
        domain = DomainFactory.create(
            status_values={StatusValue.PENDING_TRANSFER, StatusValue.CLIENT_HOLD},
            pending_transfer_expiration_time=datetime(2024, 1, 1, tzinfo=UTC),
        )
        assert domain.status_values_at(REQUEST_TIME) == {StatusValue.CLIENT_HOLD}

    def test_referenced_contacts_distinct(self) -> None:
        domain = DomainFactory.create(
            registrant="c1",
            contacts=[
                ("c1", DesignatedContactType.ADMIN),
                ("c2", DesignatedContactType.TECH),
            ],
        )
        assert domain.referenced_contacts() == ["c1", "c2"]


class TestOtherRecords:
    """Tests for hosts, contacts and registrars."""

    def test_host_subordinate(self) -> None:
        assert HostFactory.create(superordinate_domain="1-EXAMPLE").is_subordinate
        assert not HostFactory.create().is_subordinate

    def test_contact_prefers_internationalized_postal_info(self) -> None:
        contact = ContactFactory.create()
        assert contact.postal_info is contact.internationalized_postal_info

    def test_contact_falls_back_to_localized(self) -> None:
        contact = ContactFactory.create(localized=True)
        assert contact.postal_info is contact.localized_postal_info

    @pytest.mark.parametrize(
        ("state", "live"),
        [
            (RegistrarState.PENDING, False),
            (RegistrarState.ACTIVE, True),
            (RegistrarState.SUSPENDED, True),
            (RegistrarState.DISABLED, False),
        ],
    )
    def test_registrar_live_states(self, state: RegistrarState, live: bool) -> None:
        assert RegistrarFactory.create(state=state).is_live is live

    def test_unknown_fields_ignored(self) -> None:
        """Extra fields from the store are ignored."""
        data = RegistrarFactory.create().model_dump()
        data["billing_account"] = "x"
        assert RegistrarRecord.model_validate(data).client_id == "TheRegistrar"
