# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the client for device identities, device twins and device
direct methods.
"""

import logging
from .exceptions import handle_service_errors
from .precondition import IfMatchPrecondition, get_if_match_header_for
from .client_utils import ensure_identifier, bulk_entries
from .protocol.models import ImportMode

logger = logging.getLogger(__name__)


class DevicesClient(object):
    """Convenience APIs for the devices of the IoT Hub identity registry.

    Users should not instantiate this class directly. Use the ``devices`` attribute of an
    :class:`azure.iot.hubservice.IoTHubServiceClient` instead.
    """

    def __init__(self, protocol):
        """Initializer for a DevicesClient.

        :param protocol: The REST client shared by every resource client of the service client.
        :type protocol: :class:`azure.iot.hubservice.protocol.IotHubGatewayServiceAPIs`
        """
        self._protocol = protocol

    @handle_service_errors
    def get_identity(self, device_id):
        """Retrieves a device identity from IoT Hub.

        :param str device_id: The name (Id) of the device.

        :raises: :class:`ResourceNotFoundError<azure.iot.hubservice.exceptions.ResourceNotFoundError>`
            if the device does not exist.
        :raises: :class:`IoTHubServiceError<azure.iot.hubservice.exceptions.IoTHubServiceError>`
            for any other failure reported by the service.

        :returns: The DeviceIdentity object, including its current etag.
        """
        ensure_identifier("device_id", device_id)
        logger.info("Getting device identity {}".format(device_id))
        return self._protocol.devices.get_identity(device_id)

    @handle_service_errors
    def get_identities(self, max_count=None):
        """Retrieves multiple device identities from IoT Hub.

        :param int max_count: Maximum number of identities to return. The service caps the
            value at 1000. Default value: None

        :returns: A list of DeviceIdentity objects.
        """
        if max_count is not None and (isinstance(max_count, bool) or not isinstance(max_count, int)):
            raise TypeError("Invalid type for 'max_count'. Permissible type is int.")
        logger.info("Getting device identities")
        return self._protocol.devices.get_devices(top=max_count)

    @handle_service_errors
    def create_or_update_identity(
        self, device_identity, precondition=IfMatchPrecondition.UNCONDITIONAL_IF_MATCH
    ):
        """Creates or updates a device identity on IoT Hub.

        :param device_identity: The device identity to write.
        :type device_identity: :class:`azure.iot.hubservice.models.DeviceIdentity`
        :param precondition: Whether the write only applies if the etag of ``device_identity``
            still matches the one on the service. Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`

        :raises: :class:`PreconditionFailedError<azure.iot.hubservice.exceptions.PreconditionFailedError>`
            if ``precondition`` is IF_MATCH and the device changed on the service.

        :returns: The DeviceIdentity object as written, with its new etag.
        """
        if device_identity is None:
            raise ValueError("'device_identity' must be provided")
        device_id = ensure_identifier("device_id", device_identity.device_id)

        if_match = get_if_match_header_for(device_identity, precondition)
        logger.info("Writing device identity {}".format(device_id))
        return self._protocol.devices.create_or_update_identity(
            device_id, device_identity, if_match=if_match
        )

    @handle_service_errors
    def delete_identity(
        self, device_identity_or_id, precondition=IfMatchPrecondition.UNCONDITIONAL_IF_MATCH
    ):
        """Deletes a device identity from IoT Hub.

        :param device_identity_or_id: The device identity to delete, or its device Id. A bare
            device Id carries no etag, so IF_MATCH falls back to an unconditional delete.
        :type device_identity_or_id: :class:`azure.iot.hubservice.models.DeviceIdentity` or str
        :param precondition: Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`

        :raises: :class:`PreconditionFailedError<azure.iot.hubservice.exceptions.PreconditionFailedError>`
            if ``precondition`` is IF_MATCH and the device changed on the service.
        """
        if isinstance(device_identity_or_id, str):
            device_id = ensure_identifier("device_id", device_identity_or_id)
            device_identity = None
        else:
            device_identity = device_identity_or_id
            device_id = ensure_identifier(
                "device_id", getattr(device_identity, "device_id", None)
            )

        if_match = get_if_match_header_for(device_identity, precondition)
        logger.info("Deleting device identity {}".format(device_id))
        self._protocol.devices.delete_identity(device_id, if_match=if_match)

    @handle_service_errors
    def create_identities(self, devices):
        """Creates multiple device identities in a single request.

        :param devices: The device identities to create. At most 100 per request.
        :type devices: list[:class:`azure.iot.hubservice.models.DeviceIdentity`]

        :returns: The BulkRegistryOperationResult, listing the entries that failed if any.
        """
        entries = bulk_entries(devices, None, ImportMode.create, ImportMode.create)
        logger.info("Creating {} device identities".format(len(entries)))
        return self._protocol.bulk_registry.update_registry(entries)

    @handle_service_errors
    def update_identities(self, devices, precondition=IfMatchPrecondition.UNCONDITIONAL_IF_MATCH):
        """Updates multiple device identities in a single request.

        With IF_MATCH, every entry that has an etag is only updated if that etag still
        matches the service; a stale entry is reported in the result instead of raising.

        :param devices: The device identities to update. At most 100 per request.
        :type devices: list[:class:`azure.iot.hubservice.models.DeviceIdentity`]
        :param precondition: Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`

        :returns: The BulkRegistryOperationResult.
        """
        entries = bulk_entries(
            devices, precondition, ImportMode.update, ImportMode.update_if_match_etag
        )
        logger.info("Updating {} device identities".format(len(entries)))
        return self._protocol.bulk_registry.update_registry(entries)

    @handle_service_errors
    def delete_identities(self, devices, precondition=IfMatchPrecondition.UNCONDITIONAL_IF_MATCH):
        """Deletes multiple device identities in a single request.

        :param devices: The device identities to delete. At most 100 per request.
        :type devices: list[:class:`azure.iot.hubservice.models.DeviceIdentity`]
        :param precondition: Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`

        :returns: The BulkRegistryOperationResult.
        """
        entries = bulk_entries(
            devices, precondition, ImportMode.delete, ImportMode.delete_if_match_etag
        )
        logger.info("Deleting {} device identities".format(len(entries)))
        return self._protocol.bulk_registry.update_registry(entries)

    @handle_service_errors
    def get_twin(self, device_id):
        """Gets a device twin.

        :param str device_id: The name (Id) of the device.

        :returns: The TwinData object, including its current etag.
        """
        ensure_identifier("device_id", device_id)
        logger.info("Getting twin of device {}".format(device_id))
        return self._protocol.devices.get_twin(device_id)

    @handle_service_errors
    def update_twin(self, twin, precondition=IfMatchPrecondition.UNCONDITIONAL_IF_MATCH):
        """Patches the tags and desired properties of a device twin.

        :param twin: The twin patch. Its ``device_id`` names the device.
        :type twin: :class:`azure.iot.hubservice.models.TwinData`
        :param precondition: Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`

        :returns: The full TwinData after the patch was applied.
        """
        device_id = self._twin_device_id(twin)
        if_match = get_if_match_header_for(twin, precondition)
        logger.info("Updating twin of device {}".format(device_id))
        return self._protocol.devices.update_twin(device_id, twin, if_match=if_match)

    @handle_service_errors
    def replace_twin(self, twin, precondition=IfMatchPrecondition.UNCONDITIONAL_IF_MATCH):
        """Replaces the tags and desired properties of a device twin.

        :param twin: The new twin contents. Its ``device_id`` names the device.
        :type twin: :class:`azure.iot.hubservice.models.TwinData`
        :param precondition: Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`

        :returns: The TwinData as written.
        """
        device_id = self._twin_device_id(twin)
        if_match = get_if_match_header_for(twin, precondition)
        logger.info("Replacing twin of device {}".format(device_id))
        return self._protocol.devices.replace_twin(device_id, twin, if_match=if_match)

    @handle_service_errors
    def invoke_method(self, device_id, direct_method_request):
        """Invokes a direct method on a device.

        :param str device_id: The name (Id) of the device.
        :param direct_method_request: The method name, payload and timeouts.
        :type direct_method_request: :class:`azure.iot.hubservice.models.CloudToDeviceMethodRequest`

        :returns: The CloudToDeviceMethodResult with the status and payload from the device.
        """
        ensure_identifier("device_id", device_id)
        if direct_method_request is None:
            raise ValueError("'direct_method_request' must be provided")
        ensure_identifier("method_name", direct_method_request.method_name)
        logger.info(
            "Invoking method {} on device {}".format(direct_method_request.method_name, device_id)
        )
        return self._protocol.devices.invoke_method(device_id, direct_method_request)

    @staticmethod
    def _twin_device_id(twin):
        if twin is None:
            raise ValueError("'twin' must be provided")
        return ensure_identifier("device_id", twin.device_id)
