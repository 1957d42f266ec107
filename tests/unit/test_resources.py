"""Tests for the resource namespaces of SevDeskClient."""

import io
import json
from urllib.parse import parse_qsl, urlsplit

import pytest
import responses

from sevdesk import ResponseEnvelopeError, UnknownApiError


def _sent(index=0):
    request = responses.calls[index].request
    return request, dict(parse_qsl(urlsplit(request.url).query))


def _body(index=0):
    return json.loads(responses.calls[index].request.body)


class TestInvoices:
    @responses.activate
    def test_list(self, client, api_base):
        payload = {"objects": [{"id": "1", "objectName": "Invoice"}], "total": 1}
        responses.add(responses.GET, f"{api_base}/Invoice", json=payload)

        result = client.invoices.list(limit=10, offset=20, count_all=True, status=200)

        assert result == payload
        request, query = _sent()
        assert request.method == "GET"
        assert query == {"limit": "10", "offset": "20", "countAll": "true", "status": "200"}
        assert request.headers["Authorization"] == "test-api-key-12345"

    @responses.activate
    def test_list_embed(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/Invoice", json={"objects": []})
        client.invoices.list(embed=["contact", "addressCountry"])
        assert parse_qsl(urlsplit(responses.calls[0].request.url).query) == [
            ("embed", "contact"),
            ("embed", "addressCountry"),
        ]

    @responses.activate
    def test_get(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/Invoice/42", json={"objects": [{"id": "42"}]})
        assert client.invoices.get(42)["objects"][0]["id"] == "42"

    @responses.activate
    def test_get_next_number(self, client, api_base):
        url = f"{api_base}/Invoice/Factory/getNextInvoiceNumber"
        responses.add(responses.GET, url, json={"objects": "RE-1001"})

        assert client.invoices.get_next_number(invoice_type="RE", use_next_number=True) == {
            "objects": "RE-1001"
        }
        _, query = _sent()
        assert query == {"invoiceType": "RE", "useNextNumber": "true"}

    @responses.activate
    def test_save(self, client, api_base):
        body = {"invoice": {"objectName": "Invoice"}, "invoicePosSave": [], "takeDefaultAddress": True}
        responses.add(
            responses.POST,
            f"{api_base}/Invoice/Factory/saveInvoice",
            json={"objects": {"invoice": {"id": "5"}, "invoicePos": []}},
        )

        result = client.invoices.save(body)

        assert result["objects"]["invoice"]["id"] == "5"
        assert _body() == body

    @responses.activate
    def test_update_uses_model_id(self, client, api_base):
        responses.add(responses.PUT, f"{api_base}/Invoice/5", json={"objects": {"id": "5"}})
        client.invoices.update({"id": "5", "header": "New"})
        assert _body() == {"id": "5", "header": "New"}

    def test_update_requires_id(self, client):
        with pytest.raises(ValueError, match="id is required"):
            client.invoices.update({"header": "New"})

    @responses.activate
    def test_render_delete_cancel(self, client, api_base):
        responses.add(responses.POST, f"{api_base}/Invoice/5/render", json={"objects": None})
        responses.add(responses.DELETE, f"{api_base}/Invoice/5", json={"objects": [None]})
        responses.add(responses.POST, f"{api_base}/Invoice/5/cancelInvoice", json={"objects": {}})

        client.invoices.render(5)
        client.invoices.delete(5)
        client.invoices.cancel(5)

        assert [call.request.method for call in responses.calls] == ["POST", "DELETE", "POST"]

    @responses.activate
    def test_mark_as_sent(self, client, api_base):
        responses.add(responses.PUT, f"{api_base}/Invoice/5/sendBy", json={"objects": {"id": "5"}})
        client.invoices.mark_as_sent(5, send_type="VPR", send_draft=False)
        assert _body() == {"sendType": "VPR", "sendDraft": False}

    @responses.activate
    def test_get_xml(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/Invoice/5/getXml", json={"objects": "<xml/>"})
        assert client.invoices.get_xml(5)["objects"] == "<xml/>"

    @responses.activate
    def test_list_with_tags(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/Invoice", json={"objects": []})
        client.invoices.list_with_tags([3])
        _, query = _sent()
        assert query == {"tags[0][id]": "3", "tags[0][objectName]": "Tag"}

    @responses.activate
    def test_error_surfaces_from_resource(self, client, api_base):
        responses.add(
            responses.GET, f"{api_base}/Invoice/9", json={"error": {"message": "gone"}}, status=404
        )
        with pytest.raises(UnknownApiError, match="gone"):
            client.invoices.get(9)


class TestCreditNotes:
    @responses.activate
    def test_list_and_save(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/CreditNote", json={"objects": []})
        responses.add(
            responses.POST,
            f"{api_base}/CreditNote/Factory/saveCreditNote",
            json={"objects": {"creditNote": {"id": "8"}}},
        )

        client.credit_notes.list(limit=1)
        saved = client.credit_notes.save({"creditNote": {}})

        assert saved["objects"]["creditNote"]["id"] == "8"
        assert _sent(0)[1] == {"limit": "1"}

    @responses.activate
    def test_get_next_number(self, client, api_base):
        responses.add(
            responses.GET,
            f"{api_base}/CreditNote/Factory/getNextCreditNoteNumber",
            json={"objects": "GU-7"},
        )
        client.credit_notes.get_next_number(credit_note_type="CN", use_next_number=False)
        assert _sent()[1] == {"creditNoteType": "CN", "useNextNumber": "false"}


class TestVouchers:
    @responses.activate
    def test_voucher_positions_for_voucher(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/VoucherPos", json={"objects": []})
        client.voucher_positions.list(voucher_id=12)
        assert _sent()[1] == {"voucher[id]": "12", "voucher[objectName]": "Voucher"}

    @responses.activate
    def test_vouchers(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/Voucher", json={"objects": [{"id": "1"}]})
        assert client.vouchers.list()["objects"] == [{"id": "1"}]


class TestDocuments:
    @responses.activate
    def test_folders_and_documents(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/DocumentFolder", json={"objects": []})
        responses.add(responses.GET, f"{api_base}/Document", json={"objects": []})
        client.document_folders.list()
        client.documents.list(limit=5)
        assert len(responses.calls) == 2

    @responses.activate
    def test_add_uploads_multipart(self, client, api_base):
        responses.add(
            responses.POST,
            f"{api_base}/Document/Factory/fileUpload",
            json={"objects": [{"id": "77"}]},
        )

        result = client.documents.add(("receipt.pdf", io.BytesIO(b"%PDF-1.4"), "application/pdf"))

        assert result["objects"][0]["id"] == "77"
        request, query = _sent()
        assert query == {"folder": "null"}
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert b"receipt.pdf" in request.body


class TestContacts:
    @responses.activate
    def test_crud(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/Contact/3", json={"objects": [{"id": "3"}]})
        responses.add(responses.POST, f"{api_base}/Contact", json={"objects": {"id": "4"}})
        responses.add(responses.PUT, f"{api_base}/Contact/4", json={"objects": {"id": "4"}})

        client.contacts.get(3)
        client.contacts.create({"name": "ACME"})
        client.contacts.update({"id": "4", "name": "ACME GmbH"})

        assert _body(1) == {"name": "ACME"}
        assert _body(2)["name"] == "ACME GmbH"

    @responses.activate
    def test_addresses_of_contact(self, client, api_base):
        responses.add(
            responses.GET, f"{api_base}/Contact/3/getAddresses", json={"objects": [{"id": "1"}]}
        )
        assert client.contact_addresses.list(contact_id=3)["objects"] == [{"id": "1"}]

    @responses.activate
    def test_communication_ways(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/CommunicationWay", json={"objects": []})
        responses.add(responses.DELETE, f"{api_base}/CommunicationWay/6", json={"objects": [None]})
        client.communication_ways.list(contact_id=3)
        client.communication_ways.delete(6)
        assert _sent(0)[1] == {"contact_id": "3"}
        assert responses.calls[1].request.method == "DELETE"


class TestTags:
    @responses.activate
    def test_get_by_name_picks_exact_match(self, client, api_base):
        responses.add(
            responses.GET,
            f"{api_base}/Tag",
            json={"objects": [{"id": "1", "name": "paid-late"}, {"id": "2", "name": "paid"}]},
        )

        tag = client.tags.get_by_name("paid")

        assert tag == {"id": "2", "name": "paid"}
        assert _sent()[1] == {"nameStartsWith": "paid"}

    @responses.activate
    def test_get_by_name_missing(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/Tag", json={"objects": [{"name": "paid-late"}]})
        assert client.tags.get_by_name("paid") is None

    @responses.activate
    def test_create(self, client, api_base):
        responses.add(responses.POST, f"{api_base}/Tag/Factory/create", json={"objects": {"id": "9"}})
        client.tags.create("paid", {"id": 5, "objectName": "Invoice"})
        assert _body() == {"name": "paid", "object": {"id": 5, "objectName": "Invoice"}}

    @responses.activate
    def test_embedded_error(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/Tag", json={"error": {"message": "denied"}})
        with pytest.raises(ResponseEnvelopeError, match="denied"):
            client.tags.list()


class TestLookups:
    @pytest.mark.parametrize(
        "namespace,path",
        [
            ("unities", "Unity"),
            ("payment_methods", "PaymentMethod"),
            ("sev_users", "SevUser"),
            ("static_countries", "StaticCountry"),
            ("parts", "Part"),
        ],
    )
    @responses.activate
    def test_list(self, client, api_base, namespace, path):
        responses.add(responses.GET, f"{api_base}/{path}", json={"objects": [{"id": "1"}]})
        assert getattr(client, namespace).list(limit=1)["objects"] == [{"id": "1"}]


class TestTools:
    @responses.activate
    def test_bookkeeping_system_version(self, client, api_base):
        responses.add(
            responses.GET,
            f"{api_base}/Tools/bookkeepingSystemVersion",
            json={"objects": {"version": "2.0"}},
        )
        assert client.tools.get_bookkeeping_system_version()["objects"]["version"] == "2.0"
