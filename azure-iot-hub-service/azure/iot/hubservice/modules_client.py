# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the client for module identities, module twins and module
direct methods.
"""

import logging
from .exceptions import handle_service_errors
from .precondition import IfMatchPrecondition, get_if_match_header_for, normalize_precondition
from .client_utils import ensure_identifier

logger = logging.getLogger(__name__)


class ModulesClient(object):
    """Convenience APIs for the modules of the IoT Hub identity registry.

    Users should not instantiate this class directly. Use the ``modules`` attribute of an
    :class:`azure.iot.hubservice.IoTHubServiceClient` instead.
    """

    def __init__(self, protocol):
        self._protocol = protocol

    @handle_service_errors
    def get_identity(self, device_id, module_id):
        """Retrieves a module identity from IoT Hub.

        :param str device_id: The name (Id) of the device.
        :param str module_id: The name (Id) of the module.

        :returns: The ModuleIdentity object, including its current etag.
        """
        ensure_identifier("device_id", device_id)
        ensure_identifier("module_id", module_id)
        logger.info("Getting module identity {}/{}".format(device_id, module_id))
        return self._protocol.modules.get_identity(device_id, module_id)

    @handle_service_errors
    def get_identities(self, device_id):
        """Retrieves all the module identities on a device.

        :param str device_id: The name (Id) of the device.

        :returns: A list of ModuleIdentity objects.
        """
        ensure_identifier("device_id", device_id)
        logger.info("Getting module identities on device {}".format(device_id))
        return self._protocol.modules.get_modules_on_device(device_id)

    @handle_service_errors
    def create_or_update_identity(
        self, module_identity, precondition=IfMatchPrecondition.UNCONDITIONAL_IF_MATCH
    ):
        """Creates or updates a module identity on IoT Hub.

        :param module_identity: The module identity to write. Both ``device_id`` and
            ``module_id`` must be set.
        :type module_identity: :class:`azure.iot.hubservice.models.ModuleIdentity`
        :param precondition: Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`

        :raises: :class:`PreconditionFailedError<azure.iot.hubservice.exceptions.PreconditionFailedError>`
            if ``precondition`` is IF_MATCH and the module changed on the service.

        :returns: The ModuleIdentity object as written, with its new etag.
        """
        if module_identity is None:
            raise ValueError("'module_identity' must be provided")
        device_id = ensure_identifier("device_id", module_identity.device_id)
        module_id = ensure_identifier("module_id", module_identity.module_id)

        if_match = get_if_match_header_for(module_identity, precondition)
        logger.info("Writing module identity {}/{}".format(device_id, module_id))
        return self._protocol.modules.create_or_update_identity(
            device_id, module_id, module_identity, if_match=if_match
        )

    @handle_service_errors
    def delete_identity(
        self,
        module_identity_or_device_id,
        module_id=None,
        precondition=IfMatchPrecondition.UNCONDITIONAL_IF_MATCH,
    ):
        """Deletes a module identity from IoT Hub.

        Either pass the ModuleIdentity, or the device Id and the module Id. Ids carry no etag,
        so IF_MATCH falls back to an unconditional delete in that case. When a ModuleIdentity
        is passed, the second positional argument is taken as the precondition, matching
        DevicesClient.delete_identity.

        :param module_identity_or_device_id: The module identity, or the device Id.
        :type module_identity_or_device_id: :class:`azure.iot.hubservice.models.ModuleIdentity` or str
        :param str module_id: The module Id, when a device Id is passed. Default value: None
        :param precondition: Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`
        """
        if isinstance(module_identity_or_device_id, str):
            device_id = ensure_identifier("device_id", module_identity_or_device_id)
            module_id = ensure_identifier("module_id", module_id)
            module_identity = None
        else:
            module_identity = module_identity_or_device_id
            if module_id is not None:
                if precondition != IfMatchPrecondition.UNCONDITIONAL_IF_MATCH:
                    raise TypeError("precondition given both positionally and by keyword")
                precondition = normalize_precondition(module_id)
            device_id = ensure_identifier("device_id", getattr(module_identity, "device_id", None))
            module_id = ensure_identifier("module_id", getattr(module_identity, "module_id", None))

        if_match = get_if_match_header_for(module_identity, precondition)
        logger.info("Deleting module identity {}/{}".format(device_id, module_id))
        self._protocol.modules.delete_identity(device_id, module_id, if_match=if_match)

    @handle_service_errors
    def get_twin(self, device_id, module_id):
        """Gets a module twin.

        :returns: The TwinData object, including its current etag.
        """
        ensure_identifier("device_id", device_id)
        ensure_identifier("module_id", module_id)
        logger.info("Getting twin of module {}/{}".format(device_id, module_id))
        return self._protocol.modules.get_twin(device_id, module_id)

    @handle_service_errors
    def update_twin(self, twin, precondition=IfMatchPrecondition.UNCONDITIONAL_IF_MATCH):
        """Patches the tags and desired properties of a module twin.

        :param twin: The twin patch. Its ``device_id`` and ``module_id`` name the module.
        :type twin: :class:`azure.iot.hubservice.models.TwinData`
        :param precondition: Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`

        :returns: The full TwinData after the patch was applied.
        """
        device_id, module_id = self._twin_ids(twin)
        if_match = get_if_match_header_for(twin, precondition)
        logger.info("Updating twin of module {}/{}".format(device_id, module_id))
        return self._protocol.modules.update_twin(device_id, module_id, twin, if_match=if_match)

    @handle_service_errors
    def replace_twin(self, twin, precondition=IfMatchPrecondition.UNCONDITIONAL_IF_MATCH):
        """Replaces the tags and desired properties of a module twin.

        :param twin: The new twin contents. Its ``device_id`` and ``module_id`` name the module.
        :type twin: :class:`azure.iot.hubservice.models.TwinData`
        :param precondition: Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`

        :returns: The TwinData as written.
        """
        device_id, module_id = self._twin_ids(twin)
        if_match = get_if_match_header_for(twin, precondition)
        logger.info("Replacing twin of module {}/{}".format(device_id, module_id))
        return self._protocol.modules.replace_twin(device_id, module_id, twin, if_match=if_match)

    @handle_service_errors
    def invoke_method(self, device_id, module_id, direct_method_request):
        """Invokes a direct method on a module.

        :param str device_id: The name (Id) of the device.
        :param str module_id: The name (Id) of the module.
        :param direct_method_request: The method name, payload and timeouts.
        :type direct_method_request: :class:`azure.iot.hubservice.models.CloudToDeviceMethodRequest`

        :returns: The CloudToDeviceMethodResult with the status and payload from the module.
        """
        ensure_identifier("device_id", device_id)
        ensure_identifier("module_id", module_id)
        if direct_method_request is None:
            raise ValueError("'direct_method_request' must be provided")
        ensure_identifier("method_name", direct_method_request.method_name)
        logger.info(
            "Invoking method {} on module {}/{}".format(
                direct_method_request.method_name, device_id, module_id
            )
        )
        return self._protocol.modules.invoke_method(device_id, module_id, direct_method_request)

    @staticmethod
    def _twin_ids(twin):
        if twin is None:
            raise ValueError("'twin' must be provided")
        return (
            ensure_identifier("device_id", twin.device_id),
            ensure_identifier("module_id", twin.module_id),
        )
