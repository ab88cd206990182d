"""Unit tests for the nameserver view."""

from datetime import UTC, datetime

from rdapview.rdap.context import RequestContext
from rdapview.rdap.enums import OutputTier
from rdapview.rdap.views import NameserverView, RegistrarView
from tests.factories import HostFactory, RegistrarFactory

SELF_URL = "https://rdap.example/rdap/nameserver/ns1.cat.example"


def full_view(context: RequestContext, **kwargs) -> NameserverView:
    record = kwargs.pop("record", None) or HostFactory.create(
        addresses=["192.0.2.9", "2001:db8::1", "192.0.2.10"]
    )
    return NameserverView(
        record=record,
        tier=OutputTier.FULL,
        context=context,
        registrar=RegistrarView.create(
            RegistrarFactory.create(contacts=[RegistrarFactory.contact(abuse=True)]),
            OutputTier.INTERNAL,
            context,
        ),
        **kwargs,
    )


class TestNameserverView:
    """Tests for NameserverView."""

    def test_full_member_order(self, context: RequestContext) -> None:
        result = full_view(context).to_json()
        assert list(result) == [
            "objectClassName",
            "handle",
            "ldhName",
            "links",
            "status",
            "ipAddresses",
            "entities",
        ]
        assert result["objectClassName"] == "nameserver"
        assert result["handle"] == "2-EXAMPLE"
        assert result["links"][0]["href"] == SELF_URL

    def test_addresses_split_and_sorted(self, context: RequestContext) -> None:
        """Addresses sort by their text form within each family."""
        assert full_view(context).to_json()["ipAddresses"] == {
            "v4": ["192.0.2.10", "192.0.2.9"],
            "v6": ["2001:db8::1"],
        }

    def test_no_addresses_omits_member(self, context: RequestContext) -> None:
        """A host without addresses has no ipAddresses member at all."""
        result = full_view(context, record=HostFactory.create(addresses=[])).to_json()
        assert "ipAddresses" not in result

    def test_only_v6(self, context: RequestContext) -> None:
        result = full_view(context, record=HostFactory.create(addresses=["2001:db8::2"])).to_json()
        assert result["ipAddresses"] == {"v6": ["2001:db8::2"]}

    def test_linked_status(self, context: RequestContext) -> None:
        assert full_view(context, is_linked=True).to_json()["status"] == ["active", "associated"]

    def test_parent_pending_transfer(self, context: RequestContext) -> None:
        result = full_view(context, parent_pending_transfer=True).to_json()
        assert result["status"] == ["active", "pending transfer"]

    def test_deleted_host(self, context: RequestContext) -> None:
        record = HostFactory.create(deletion_time=datetime(2021, 1, 1, tzinfo=UTC))
        assert full_view(context, record=record).to_json()["status"] == ["inactive"]

    def test_registrar_embedded(self, context: RequestContext) -> None:
        entities = full_view(context).to_json()["entities"]
        assert len(entities) == 1
        assert entities[0]["roles"] == ["registrar"]

    def test_summary(self, context: RequestContext) -> None:
        """Search results keep addresses but drop status and registrar."""
        view = NameserverView(
            record=HostFactory.create(addresses=["192.0.2.1"]),
            tier=OutputTier.SUMMARY,
            context=context,
        )
        result = view.to_json()
        assert result["ipAddresses"] == {"v4": ["192.0.2.1"]}
        assert "status" not in result
        assert "entities" not in result
        assert result["remarks"][0]["title"] == "Incomplete Data"

    def test_internal(self, context: RequestContext) -> None:
        """Embedded nameservers show neither status nor addresses."""
        view = NameserverView(
            record=HostFactory.create(addresses=["192.0.2.1"]),
            tier=OutputTier.INTERNAL,
            context=context,
        )
        assert list(view.to_json()) == [
            "objectClassName",
            "handle",
            "ldhName",
            "links",
            "remarks",
        ]

    def test_unicode_name(self, context: RequestContext) -> None:
        view = NameserverView(
            record=HostFactory.create(name="ns1.xn--bcher-kva.example"),
            tier=OutputTier.INTERNAL,
            context=context,
        )
        assert view.to_json()["unicodeName"] == "ns1.bücher.example"
