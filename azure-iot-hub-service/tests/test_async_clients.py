# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import asyncio
import threading
import pytest
from msrest import Deserializer
from msrest.exceptions import HttpOperationError
from azure.iot.hubservice import aio
from azure.iot.hubservice import async_adapter
from azure.iot.hubservice.models import (
    DeviceIdentity,
    ModuleIdentity,
    TwinData,
    IfMatchPrecondition,
    JobRequestOptions,
)
from azure.iot.hubservice import exceptions
from .common_fixtures import (
    make_response,
    fake_connection_string,
    fake_device_id,
    fake_module_id,
    fake_etag,
    fake_quoted_etag,
    fake_job_id,
    fake_output_blob_container_uri,
)


@pytest.fixture
def async_service_client(
    mock_devices_operations,
    mock_modules_operations,
    mock_jobs_operations,
    mock_bulk_registry_operations,
):
    return aio.IoTHubServiceClient.from_connection_string(fake_connection_string)


@pytest.mark.describe("emulate_async()")
class TestEmulateAsync(object):
    @pytest.mark.it("Returns a coroutine function that runs the wrapped function off the event loop thread")
    @pytest.mark.asyncio
    async def test_runs_in_executor(self):
        loop_thread = threading.current_thread()

        def fn(a, b=None):
            return (threading.current_thread(), a, b)

        thread, a, b = await async_adapter.emulate_async(fn)(1, b=2)
        assert (a, b) == (1, 2)
        assert thread is not loop_thread

    @pytest.mark.it("Raises the exception of the wrapped function")
    @pytest.mark.asyncio
    async def test_raises(self):
        def fn():
            raise ValueError("bad")

        with pytest.raises(ValueError):
            await async_adapter.emulate_async(fn)()

    @pytest.mark.it("Stops waiting for the result when the awaiting task is cancelled")
    @pytest.mark.asyncio
    async def test_cancellation(self):
        release = threading.Event()

        def fn():
            release.wait(5)

        task = asyncio.ensure_future(async_adapter.emulate_async(fn)())
        await asyncio.sleep(0.05)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        release.set()


@pytest.mark.describe("IoTHubServiceClient (aio) - Instantiation")
class TestAsyncInstantiation(object):
    @pytest.mark.it("Sets the devices, modules and jobs clients")
    def test_attributes(self, async_service_client):
        assert isinstance(async_service_client.devices, aio.DevicesClient)
        assert isinstance(async_service_client.modules, aio.ModulesClient)
        assert isinstance(async_service_client.jobs, aio.JobsClient)

    @pytest.mark.it("Raises a ValueError for an invalid connection string")
    def test_invalid(self):
        with pytest.raises(ValueError):
            aio.IoTHubServiceClient.from_connection_string("")


@pytest.mark.describe("DevicesClient (aio)")
class TestAsyncDevicesClient(object):
    @pytest.mark.it("Gets a device identity")
    @pytest.mark.asyncio
    async def test_get_identity(self, async_service_client, mock_devices_operations):
        result = await async_service_client.devices.get_identity(fake_device_id)
        assert mock_devices_operations.get_identity.call_args == ((fake_device_id,),)
        assert result is mock_devices_operations.get_identity.return_value

    @pytest.mark.it("Computes the If-Match header like the synchronous client")
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "precondition, expected_if_match",
        [
            (IfMatchPrecondition.UNCONDITIONAL_IF_MATCH, "*"),
            (IfMatchPrecondition.IF_MATCH, fake_quoted_etag),
        ],
        ids=["UNCONDITIONAL_IF_MATCH", "IF_MATCH"],
    )
    async def test_create_or_update(
        self, async_service_client, mock_devices_operations, precondition, expected_if_match
    ):
        device = DeviceIdentity(device_id=fake_device_id, etag=fake_etag)
        await async_service_client.devices.create_or_update_identity(device, precondition)
        assert mock_devices_operations.create_or_update_identity.call_args == (
            (fake_device_id, device),
            {"if_match": expected_if_match},
        )

    @pytest.mark.it("Sends the wildcard by default")
    @pytest.mark.asyncio
    async def test_default_precondition(self, async_service_client, mock_devices_operations):
        twin = TwinData(device_id=fake_device_id, etag=fake_etag)
        await async_service_client.devices.update_twin(twin)
        assert mock_devices_operations.update_twin.call_args[1] == {"if_match": "*"}

    @pytest.mark.it("Deletes a device identity with its etag under IF_MATCH")
    @pytest.mark.asyncio
    async def test_delete(self, async_service_client, mock_devices_operations):
        device = DeviceIdentity(device_id=fake_device_id, etag=fake_etag)
        await async_service_client.devices.delete_identity(device, IfMatchPrecondition.IF_MATCH)
        assert mock_devices_operations.delete_identity.call_args == (
            (fake_device_id,),
            {"if_match": fake_quoted_etag},
        )

    @pytest.mark.it("Raises a PreconditionFailedError when the service returns 412")
    @pytest.mark.asyncio
    async def test_precondition_failed(self, async_service_client, mock_devices_operations):
        mock_devices_operations.replace_twin.side_effect = HttpOperationError(
            Deserializer(), make_response(412, reason="Precondition Failed")
        )
        twin = TwinData(device_id=fake_device_id, etag=fake_etag)
        with pytest.raises(exceptions.PreconditionFailedError):
            await async_service_client.devices.replace_twin(twin, IfMatchPrecondition.IF_MATCH)
        assert mock_devices_operations.replace_twin.call_count == 1

    @pytest.mark.it("Raises a ValueError for a missing device id")
    @pytest.mark.asyncio
    async def test_missing_id(self, async_service_client, mock_devices_operations):
        with pytest.raises(ValueError):
            await async_service_client.devices.get_twin("")
        assert mock_devices_operations.get_twin.call_count == 0

    @pytest.mark.it("Runs bulk updates with the conditional import mode under IF_MATCH")
    @pytest.mark.asyncio
    async def test_update_identities(self, async_service_client, mock_bulk_registry_operations):
        devices = [DeviceIdentity(device_id=fake_device_id, etag=fake_etag)]
        await async_service_client.devices.update_identities(devices, IfMatchPrecondition.IF_MATCH)
        entries = mock_bulk_registry_operations.update_registry.call_args[0][0]
        assert entries[0].import_mode == "updateIfMatchETag"


@pytest.mark.describe("ModulesClient (aio)")
class TestAsyncModulesClient(object):
    @pytest.mark.it("Writes a module identity with its etag under IF_MATCH")
    @pytest.mark.asyncio
    async def test_create_or_update(self, async_service_client, mock_modules_operations):
        module = ModuleIdentity(device_id=fake_device_id, module_id=fake_module_id, etag=fake_etag)
        await async_service_client.modules.create_or_update_identity(
            module, IfMatchPrecondition.IF_MATCH
        )
        assert mock_modules_operations.create_or_update_identity.call_args == (
            (fake_device_id, fake_module_id, module),
            {"if_match": fake_quoted_etag},
        )

    @pytest.mark.it("Deletes a module by ids")
    @pytest.mark.asyncio
    async def test_delete(self, async_service_client, mock_modules_operations):
        await async_service_client.modules.delete_identity(fake_device_id, fake_module_id)
        assert mock_modules_operations.delete_identity.call_args == (
            (fake_device_id, fake_module_id),
            {"if_match": "*"},
        )

    @pytest.mark.it("Deletes a module identity with the precondition passed positionally")
    @pytest.mark.asyncio
    async def test_delete_positional_precondition(self, async_service_client, mock_modules_operations):
        module = ModuleIdentity(device_id=fake_device_id, module_id=fake_module_id, etag=fake_etag)
        await async_service_client.modules.delete_identity(module, IfMatchPrecondition.IF_MATCH)
        assert mock_modules_operations.delete_identity.call_args == (
            (fake_device_id, fake_module_id),
            {"if_match": fake_quoted_etag},
        )

    @pytest.mark.it("Lists the modules of a device")
    @pytest.mark.asyncio
    async def test_get_identities(self, async_service_client, mock_modules_operations):
        result = await async_service_client.modules.get_identities(fake_device_id)
        assert result is mock_modules_operations.get_modules_on_device.return_value


@pytest.mark.describe("JobsClient (aio)")
class TestAsyncJobsClient(object):
    @pytest.mark.it("Creates an export job with the default blob name and authentication type")
    @pytest.mark.asyncio
    async def test_export(self, async_service_client, mock_jobs_operations):
        await async_service_client.jobs.create_export_devices_job(
            fake_output_blob_container_uri, False, JobRequestOptions()
        )
        job_properties = mock_jobs_operations.create_import_export_job.call_args[0][0]
        assert job_properties.output_blob_name == "devices.txt"
        assert job_properties.storage_authentication_type == "keyBased"

    @pytest.mark.it("Cancels a job")
    @pytest.mark.asyncio
    async def test_cancel(self, async_service_client, mock_jobs_operations):
        await async_service_client.jobs.cancel_import_export_job(fake_job_id)
        assert mock_jobs_operations.cancel_import_export_job.call_args == ((fake_job_id,),)
