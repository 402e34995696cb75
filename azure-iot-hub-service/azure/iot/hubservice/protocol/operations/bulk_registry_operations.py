# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from msrest.pipeline import ClientRawResponse
from msrest.exceptions import HttpOperationError

from .operations_base import OperationsBase


class BulkRegistryOperations(OperationsBase):
    """BulkRegistryOperations operations.

    :param client: Client for service requests.
    :param config: Configuration of service client.
    :param serializer: An object model serializer.
    :param deserializer: An object model deserializer.
    """

    def update_registry(self, devices, custom_headers=None, raw=False, **operation_config):
        """Creates, updates, or deletes the identities of multiple devices from the IoT Hub
        identity registry.

        A device identity can be specified only once in the list. Different operations
        (create, update, delete) on different devices are allowed. A maximum of 100 devices
        can be specified per invocation. The service answers 400 when some of the entries
        failed; that body still describes the outcome and is returned rather than raised.

        :param devices: The registry operations to perform.
        :type devices: list[~azure.iot.hubservice.protocol.models.ExportImportDevice]
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: BulkRegistryOperationResult or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.BulkRegistryOperationResult or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.update_registry.metadata["url"])
        body_content = self._serialize.body(devices, "[ExportImportDevice]")
        request = self._client.post(
            url,
            self._query_parameters(),
            self._header_parameters(custom_headers, has_body=True),
            body_content,
        )
        response = self._client.send(request, stream=False, **operation_config)

        if response.status_code not in [200, 400]:
            raise HttpOperationError(self._deserialize, response)

        deserialized = self._deserialize("BulkRegistryOperationResult", response)

        if raw:
            return ClientRawResponse(deserialized, response)

        return deserialized

    update_registry.metadata = {"url": "/devices"}
