# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest
from msrest import Deserializer
from msrest.exceptions import HttpOperationError
from azure.iot.hubservice.models import (
    ModuleIdentity,
    TwinData,
    CloudToDeviceMethodRequest,
    IfMatchPrecondition,
)
from azure.iot.hubservice import exceptions
from .common_fixtures import (
    make_response,
    fake_device_id,
    fake_module_id,
    fake_managed_by,
    fake_etag,
    fake_quoted_etag,
)


@pytest.fixture
def module_with_etag():
    return ModuleIdentity(
        device_id=fake_device_id, module_id=fake_module_id, managed_by=fake_managed_by, etag=fake_etag
    )


@pytest.mark.describe("ModulesClient - reads")
class TestModuleReads(object):
    @pytest.mark.it("Gets a module identity by device id and module id")
    def test_get_identity(self, service_client, mock_modules_operations):
        result = service_client.modules.get_identity(fake_device_id, fake_module_id)
        assert mock_modules_operations.get_identity.call_args == ((fake_device_id, fake_module_id),)
        assert result is mock_modules_operations.get_identity.return_value

    @pytest.mark.it("Lists the module identities of a device")
    def test_get_identities(self, service_client, mock_modules_operations):
        result = service_client.modules.get_identities(fake_device_id)
        assert mock_modules_operations.get_modules_on_device.call_args == ((fake_device_id,),)
        assert result is mock_modules_operations.get_modules_on_device.return_value

    @pytest.mark.it("Gets the twin of a module")
    def test_get_twin(self, service_client, mock_modules_operations):
        service_client.modules.get_twin(fake_device_id, fake_module_id)
        assert mock_modules_operations.get_twin.call_args == ((fake_device_id, fake_module_id),)

    @pytest.mark.it("Raises a ValueError without sending a request when an id is missing")
    @pytest.mark.parametrize(
        "device_id, module_id",
        [(None, fake_module_id), (fake_device_id, None), ("", fake_module_id), (fake_device_id, "")],
    )
    def test_missing_ids(self, service_client, mock_modules_operations, device_id, module_id):
        with pytest.raises(ValueError):
            service_client.modules.get_identity(device_id, module_id)
        assert mock_modules_operations.get_identity.call_count == 0


@pytest.mark.describe("ModulesClient - .create_or_update_identity()")
class TestModuleCreateOrUpdate(object):
    @pytest.mark.it("Sends the wildcard If-Match by default")
    def test_default(self, service_client, mock_modules_operations, module_with_etag):
        service_client.modules.create_or_update_identity(module_with_etag)
        assert mock_modules_operations.create_or_update_identity.call_args == (
            (fake_device_id, fake_module_id, module_with_etag),
            {"if_match": "*"},
        )

    @pytest.mark.it("Sends the quoted etag of the module with IF_MATCH")
    def test_if_match(self, service_client, mock_modules_operations, module_with_etag):
        service_client.modules.create_or_update_identity(
            module_with_etag, IfMatchPrecondition.IF_MATCH
        )
        assert mock_modules_operations.create_or_update_identity.call_args[1] == {
            "if_match": fake_quoted_etag
        }

    @pytest.mark.it("Raises a ValueError when the module has no device id or no module id")
    @pytest.mark.parametrize(
        "module",
        [
            pytest.param(ModuleIdentity(module_id=fake_module_id), id="No device id"),
            pytest.param(ModuleIdentity(device_id=fake_device_id), id="No module id"),
        ],
    )
    def test_missing_ids(self, service_client, mock_modules_operations, module):
        with pytest.raises(ValueError):
            service_client.modules.create_or_update_identity(module)
        assert mock_modules_operations.create_or_update_identity.call_count == 0

    @pytest.mark.it("Raises a PreconditionFailedError when the service returns 412")
    def test_precondition_failed(self, service_client, mock_modules_operations, module_with_etag):
        mock_modules_operations.create_or_update_identity.side_effect = HttpOperationError(
            Deserializer(), make_response(412, reason="Precondition Failed")
        )
        with pytest.raises(exceptions.PreconditionFailedError):
            service_client.modules.create_or_update_identity(
                module_with_etag, IfMatchPrecondition.IF_MATCH
            )
        assert mock_modules_operations.create_or_update_identity.call_count == 1


@pytest.mark.describe("ModulesClient - .delete_identity()")
class TestModuleDelete(object):
    @pytest.mark.it("Deletes by device id and module id with the wildcard If-Match")
    def test_by_ids(self, service_client, mock_modules_operations):
        service_client.modules.delete_identity(
            fake_device_id, fake_module_id, IfMatchPrecondition.IF_MATCH
        )
        assert mock_modules_operations.delete_identity.call_args == (
            (fake_device_id, fake_module_id),
            {"if_match": "*"},
        )

    @pytest.mark.it("Deletes a module identity with its quoted etag under IF_MATCH")
    def test_by_identity(self, service_client, mock_modules_operations, module_with_etag):
        service_client.modules.delete_identity(
            module_with_etag, precondition=IfMatchPrecondition.IF_MATCH
        )
        assert mock_modules_operations.delete_identity.call_args == (
            (fake_device_id, fake_module_id),
            {"if_match": fake_quoted_etag},
        )

    @pytest.mark.it("Takes the second positional argument as the precondition for a module identity")
    def test_positional_precondition(self, service_client, mock_modules_operations, module_with_etag):
        service_client.modules.delete_identity(module_with_etag, IfMatchPrecondition.IF_MATCH)
        assert mock_modules_operations.delete_identity.call_args == (
            (fake_device_id, fake_module_id),
            {"if_match": fake_quoted_etag},
        )

    @pytest.mark.it("Raises a ValueError when a module identity is followed by a module id")
    def test_identity_with_module_id(self, service_client, mock_modules_operations, module_with_etag):
        with pytest.raises(ValueError):
            service_client.modules.delete_identity(module_with_etag, fake_module_id)
        assert mock_modules_operations.delete_identity.call_count == 0

    @pytest.mark.it("Raises a TypeError when the precondition is given twice")
    def test_precondition_twice(self, service_client, mock_modules_operations, module_with_etag):
        with pytest.raises(TypeError):
            service_client.modules.delete_identity(
                module_with_etag,
                IfMatchPrecondition.IF_MATCH,
                precondition=IfMatchPrecondition.IF_MATCH,
            )
        assert mock_modules_operations.delete_identity.call_count == 0

    @pytest.mark.it("Raises a ValueError when a device id is given without module id")
    def test_missing_module_id(self, service_client, mock_modules_operations):
        with pytest.raises(ValueError):
            service_client.modules.delete_identity(fake_device_id)
        assert mock_modules_operations.delete_identity.call_count == 0


@pytest.mark.describe("ModulesClient - twin writes")
class TestModuleTwinWrites(object):
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
        self, service_client, mock_modules_operations, operation, precondition, expected_if_match
    ):
        twin = TwinData(device_id=fake_device_id, module_id=fake_module_id, etag=fake_etag)
        getattr(service_client.modules, operation)(twin, precondition)
        assert getattr(mock_modules_operations, operation).call_args == (
            (fake_device_id, fake_module_id, twin),
            {"if_match": expected_if_match},
        )

    @pytest.mark.it("Raises a ValueError for a twin without module id")
    def test_missing_module_id(self, service_client, mock_modules_operations):
        with pytest.raises(ValueError):
            service_client.modules.replace_twin(TwinData(device_id=fake_device_id))
        assert mock_modules_operations.replace_twin.call_count == 0


@pytest.mark.describe("ModulesClient - .invoke_method()")
class TestModuleInvokeMethod(object):
    @pytest.mark.it("Invokes the direct method on the module")
    def test_invoke(self, service_client, mock_modules_operations):
        method_request = CloudToDeviceMethodRequest(method_name="ping")
        service_client.modules.invoke_method(fake_device_id, fake_module_id, method_request)
        assert mock_modules_operations.invoke_method.call_args == (
            (fake_device_id, fake_module_id, method_request),
        )
