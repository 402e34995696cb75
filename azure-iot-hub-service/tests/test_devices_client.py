# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import logging
import pytest
from msrest import Deserializer
from msrest.exceptions import HttpOperationError
from azure.iot.hubservice.models import (
    DeviceIdentity,
    TwinData,
    CloudToDeviceMethodRequest,
    IfMatchPrecondition,
    ImportMode,
)
from azure.iot.hubservice import exceptions
from .common_fixtures import make_response, fake_device_id, fake_etag, fake_quoted_etag

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture
def device_with_etag():
    return DeviceIdentity(device_id=fake_device_id, status="enabled", etag=fake_etag)


@pytest.fixture
def twin_with_etag():
    return TwinData(device_id=fake_device_id, etag=fake_etag, tags={"house": "Ravenclaw"})


@pytest.mark.describe("DevicesClient - .get_identity()")
class TestGetIdentity(object):
    @pytest.mark.it("Calls get_identity on the devices operations with the device id")
    def test_calls_operations(self, service_client, mock_devices_operations):
        result = service_client.devices.get_identity(fake_device_id)
        assert mock_devices_operations.get_identity.call_args == ((fake_device_id,),)
        assert result is mock_devices_operations.get_identity.return_value

    @pytest.mark.it("Raises a ValueError without sending a request when the device id is missing")
    @pytest.mark.parametrize("device_id", [None, "", "  "])
    def test_missing_id(self, service_client, mock_devices_operations, device_id):
        with pytest.raises(ValueError):
            service_client.devices.get_identity(device_id)
        assert mock_devices_operations.get_identity.call_count == 0

    @pytest.mark.it("Raises a ResourceNotFoundError when the service returns 404")
    def test_not_found(self, service_client, mock_devices_operations):
        mock_devices_operations.get_identity.side_effect = HttpOperationError(
            Deserializer(), make_response(404, {"Message": "DeviceNotFound"}, reason="Not Found")
        )
        with pytest.raises(exceptions.ResourceNotFoundError) as e_info:
            service_client.devices.get_identity(fake_device_id)
        assert e_info.value.status_code == 404


@pytest.mark.describe("DevicesClient - .get_identities()")
class TestGetIdentities(object):
    @pytest.mark.it("Passes max_count as the top parameter")
    @pytest.mark.parametrize("max_count", [None, 10])
    def test_top(self, service_client, mock_devices_operations, max_count):
        service_client.devices.get_identities(max_count)
        assert mock_devices_operations.get_devices.call_args[1] == {"top": max_count}

    @pytest.mark.it("Raises a TypeError for a non-integer max_count")
    def test_invalid_max_count(self, service_client, mock_devices_operations):
        with pytest.raises(TypeError):
            service_client.devices.get_identities("10")
        assert mock_devices_operations.get_devices.call_count == 0


@pytest.mark.describe("DevicesClient - .create_or_update_identity()")
class TestCreateOrUpdateIdentity(object):
    @pytest.mark.it("Sends the wildcard If-Match by default")
    def test_default_unconditional(self, service_client, mock_devices_operations, device_with_etag):
        service_client.devices.create_or_update_identity(device_with_etag)
        args, kwargs = mock_devices_operations.create_or_update_identity.call_args
        assert args == (fake_device_id, device_with_etag)
        assert kwargs == {"if_match": "*"}

    @pytest.mark.it("Sends the quoted etag of the device with IF_MATCH")
    def test_if_match(self, service_client, mock_devices_operations, device_with_etag):
        service_client.devices.create_or_update_identity(
            device_with_etag, IfMatchPrecondition.IF_MATCH
        )
        kwargs = mock_devices_operations.create_or_update_identity.call_args[1]
        assert kwargs == {"if_match": fake_quoted_etag}

    @pytest.mark.it("Sends the wildcard and logs a warning with IF_MATCH on a device without etag")
    def test_if_match_without_etag(self, service_client, mock_devices_operations, caplog):
        with caplog.at_level(logging.WARNING):
            service_client.devices.create_or_update_identity(
                DeviceIdentity(device_id=fake_device_id), IfMatchPrecondition.IF_MATCH
            )
        assert mock_devices_operations.create_or_update_identity.call_args[1] == {"if_match": "*"}
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    @pytest.mark.it("Returns the device written by the service")
    def test_returns(self, service_client, mock_devices_operations, device_with_etag):
        result = service_client.devices.create_or_update_identity(device_with_etag)
        assert result is mock_devices_operations.create_or_update_identity.return_value

    @pytest.mark.it("Raises a ValueError without sending a request when the device id is missing")
    @pytest.mark.parametrize(
        "device", [pytest.param(None, id="No device"), pytest.param(DeviceIdentity(), id="No id")]
    )
    def test_missing_id(self, service_client, mock_devices_operations, device):
        with pytest.raises(ValueError):
            service_client.devices.create_or_update_identity(device)
        assert mock_devices_operations.create_or_update_identity.call_count == 0

    @pytest.mark.it("Raises a PreconditionFailedError without retrying when the service returns 412")
    def test_precondition_failed(self, service_client, mock_devices_operations, device_with_etag):
        mock_devices_operations.create_or_update_identity.side_effect = HttpOperationError(
            Deserializer(), make_response(412, reason="Precondition Failed")
        )
        with pytest.raises(exceptions.PreconditionFailedError):
            service_client.devices.create_or_update_identity(
                device_with_etag, IfMatchPrecondition.IF_MATCH
            )
        assert mock_devices_operations.create_or_update_identity.call_count == 1


@pytest.mark.describe("DevicesClient - .delete_identity()")
class TestDeleteIdentity(object):
    @pytest.mark.it("Deletes by device id with the wildcard If-Match")
    @pytest.mark.parametrize(
        "precondition",
        [IfMatchPrecondition.UNCONDITIONAL_IF_MATCH, IfMatchPrecondition.IF_MATCH],
        ids=["UNCONDITIONAL_IF_MATCH", "IF_MATCH"],
    )
    def test_by_id(self, service_client, mock_devices_operations, precondition):
        assert service_client.devices.delete_identity(fake_device_id, precondition) is None
        assert mock_devices_operations.delete_identity.call_args == (
            (fake_device_id,),
            {"if_match": "*"},
        )

    @pytest.mark.it("Deletes a device identity with its quoted etag under IF_MATCH")
    def test_by_identity(self, service_client, mock_devices_operations, device_with_etag):
        service_client.devices.delete_identity(device_with_etag, IfMatchPrecondition.IF_MATCH)
        assert mock_devices_operations.delete_identity.call_args == (
            (fake_device_id,),
            {"if_match": fake_quoted_etag},
        )

    @pytest.mark.it("Raises a ValueError for an empty device id")
    def test_empty_id(self, service_client, mock_devices_operations):
        with pytest.raises(ValueError):
            service_client.devices.delete_identity("")
        assert mock_devices_operations.delete_identity.call_count == 0


@pytest.mark.describe("DevicesClient - bulk operations")
class TestBulkOperations(object):
    @pytest.fixture
    def devices(self):
        return [
            DeviceIdentity(device_id="one", etag="E1", status="enabled"),
            DeviceIdentity(device_id="two", status="disabled"),
        ]

    @pytest.mark.it("Creates identities with the create import mode and no etag")
    def test_create_identities(self, service_client, mock_bulk_registry_operations, devices):
        service_client.devices.create_identities(devices)
        entries = mock_bulk_registry_operations.update_registry.call_args[0][0]
        assert [e.id for e in entries] == ["one", "two"]
        assert all(e.import_mode == ImportMode.create for e in entries)
        assert all(e.e_tag is None for e in entries)
        assert entries[1].status == "disabled"

    @pytest.mark.it("Updates identities with updateIfMatchETag for entries that have an etag")
    def test_update_if_match(self, service_client, mock_bulk_registry_operations, devices):
        service_client.devices.update_identities(devices, IfMatchPrecondition.IF_MATCH)
        entries = mock_bulk_registry_operations.update_registry.call_args[0][0]
        assert entries[0].import_mode == ImportMode.update_if_match_etag
        assert entries[0].e_tag == "E1"
        assert entries[1].import_mode == ImportMode.update
        assert entries[1].e_tag is None

    @pytest.mark.it("Updates identities with the plain update mode by default")
    def test_update_unconditional(self, service_client, mock_bulk_registry_operations, devices):
        service_client.devices.update_identities(devices)
        entries = mock_bulk_registry_operations.update_registry.call_args[0][0]
        assert all(e.import_mode == ImportMode.update for e in entries)
        assert all(e.e_tag is None for e in entries)

    @pytest.mark.it("Deletes identities with deleteIfMatchETag for entries that have an etag")
    def test_delete_if_match(self, service_client, mock_bulk_registry_operations, devices):
        result = service_client.devices.delete_identities(devices, IfMatchPrecondition.IF_MATCH)
        entries = mock_bulk_registry_operations.update_registry.call_args[0][0]
        assert entries[0].import_mode == ImportMode.delete_if_match_etag
        assert entries[1].import_mode == ImportMode.delete
        assert result is mock_bulk_registry_operations.update_registry.return_value

    @pytest.mark.it("Raises a ValueError for an empty list of devices")
    def test_empty(self, service_client, mock_bulk_registry_operations):
        with pytest.raises(ValueError):
            service_client.devices.create_identities([])
        assert mock_bulk_registry_operations.update_registry.call_count == 0


@pytest.mark.describe("DevicesClient - twins")
class TestTwins(object):
    @pytest.mark.it("Gets the twin of a device")
    def test_get_twin(self, service_client, mock_devices_operations):
        result = service_client.devices.get_twin(fake_device_id)
        assert mock_devices_operations.get_twin.call_args == ((fake_device_id,),)
        assert result is mock_devices_operations.get_twin.return_value

    @pytest.mark.it("Updates and replaces the twin with the If-Match header of the precondition")
    @pytest.mark.parametrize("operation", ["update_twin", "replace_twin"])
    @pytest.mark.parametrize(
        "precondition, expected_if_match",
        [
            (IfMatchPrecondition.UNCONDITIONAL_IF_MATCH, "*"),
            (IfMatchPrecondition.IF_MATCH, fake_quoted_etag),
        ],
        ids=["UNCONDITIONAL_IF_MATCH", "IF_MATCH"],
    )
    def test_writes(
        self,
        service_client,
        mock_devices_operations,
        twin_with_etag,
        operation,
        precondition,
        expected_if_match,
    ):
        getattr(service_client.devices, operation)(twin_with_etag, precondition)
        assert getattr(mock_devices_operations, operation).call_args == (
            (fake_device_id, twin_with_etag),
            {"if_match": expected_if_match},
        )

    @pytest.mark.it("Raises a ValueError for a twin without device id")
    def test_missing_id(self, service_client, mock_devices_operations):
        with pytest.raises(ValueError):
            service_client.devices.update_twin(TwinData(tags={}))
        assert mock_devices_operations.update_twin.call_count == 0


@pytest.mark.describe("DevicesClient - .invoke_method()")
class TestInvokeMethod(object):
    @pytest.mark.it("Invokes the direct method on the device")
    def test_invoke(self, service_client, mock_devices_operations):
        method_request = CloudToDeviceMethodRequest(method_name="reboot", payload={})
        result = service_client.devices.invoke_method(fake_device_id, method_request)
        assert mock_devices_operations.invoke_method.call_args == (
            (fake_device_id, method_request),
        )
        assert result is mock_devices_operations.invoke_method.return_value

    @pytest.mark.it("Raises a ValueError when the method name is missing")
    def test_no_method_name(self, service_client, mock_devices_operations):
        with pytest.raises(ValueError):
            service_client.devices.invoke_method(fake_device_id, CloudToDeviceMethodRequest())
        assert mock_devices_operations.invoke_method.call_count == 0
