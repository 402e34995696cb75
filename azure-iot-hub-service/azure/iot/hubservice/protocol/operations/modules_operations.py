# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from .operations_base import OperationsBase


class ModulesOperations(OperationsBase):
    """ModulesOperations operations.

    :param client: Client for service requests.
    :param config: Configuration of service client.
    :param serializer: An object model serializer.
    :param deserializer: An object model deserializer.
    """

    def get_modules_on_device(self, id, custom_headers=None, raw=False, **operation_config):
        """Gets all the module identities on the device.

        :param id: The unique identifier of the device.
        :type id: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: list or ClientRawResponse if raw=true
        :rtype: list[~azure.iot.hubservice.protocol.models.ModuleIdentity] or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.get_modules_on_device.metadata["url"], id=id)
        request = self._client.get(
            url, self._query_parameters(), self._header_parameters(custom_headers)
        )
        return self._send(request, [200], "[ModuleIdentity]", raw, **operation_config)

    get_modules_on_device.metadata = {"url": "/devices/{id}/modules"}

    def get_identity(self, id, mid, custom_headers=None, raw=False, **operation_config):
        """Gets a module identity on the device.

        :param id: The unique identifier of the device.
        :type id: str
        :param mid: The unique identifier of the module.
        :type mid: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: ModuleIdentity or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.ModuleIdentity or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.get_identity.metadata["url"], id=id, mid=mid)
        request = self._client.get(
            url, self._query_parameters(), self._header_parameters(custom_headers)
        )
        return self._send(request, [200], "ModuleIdentity", raw, **operation_config)

    get_identity.metadata = {"url": "/devices/{id}/modules/{mid}"}

    def create_or_update_identity(
        self, id, mid, module, if_match=None, custom_headers=None, raw=False, **operation_config
    ):
        """Creates or updates the module identity for a device in the IoT Hub.

        :param id: The unique identifier of the device.
        :type id: str
        :param mid: The unique identifier of the module.
        :type mid: str
        :param module: The module identity.
        :type module: ~azure.iot.hubservice.protocol.models.ModuleIdentity
        :param if_match: The string representing a weak ETag for the module, as per RFC7232,
         or the wildcard "*".
        :type if_match: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: ModuleIdentity or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.ModuleIdentity or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.create_or_update_identity.metadata["url"], id=id, mid=mid)
        body_content = self._serialize.body(module, "ModuleIdentity")
        request = self._client.put(
            url,
            self._query_parameters(),
            self._header_parameters(custom_headers, if_match, has_body=True),
            body_content,
        )
        return self._send(request, [200, 201], "ModuleIdentity", raw, **operation_config)

    create_or_update_identity.metadata = {"url": "/devices/{id}/modules/{mid}"}

    def delete_identity(
        self, id, mid, if_match=None, custom_headers=None, raw=False, **operation_config
    ):
        """Deletes the module identity for a device in the IoT Hub.

        :param id: The unique identifier of the device.
        :type id: str
        :param mid: The unique identifier of the module.
        :type mid: str
        :param if_match: The string representing a weak ETag for the module, as per RFC7232,
         or the wildcard "*".
        :type if_match: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: None or ClientRawResponse if raw=true
        :rtype: None or ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.delete_identity.metadata["url"], id=id, mid=mid)
        request = self._client.delete(
            url, self._query_parameters(), self._header_parameters(custom_headers, if_match)
        )
        return self._send(request, [200, 204], None, raw, **operation_config)

    delete_identity.metadata = {"url": "/devices/{id}/modules/{mid}"}

    def get_twin(self, id, mid, custom_headers=None, raw=False, **operation_config):
        """Gets the module twin.

        :param id: The unique identifier of the device.
        :type id: str
        :param mid: The unique identifier of the module.
        :type mid: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: TwinData or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.TwinData or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.get_twin.metadata["url"], id=id, mid=mid)
        request = self._client.get(
            url, self._query_parameters(), self._header_parameters(custom_headers)
        )
        return self._send(request, [200], "TwinData", raw, **operation_config)

    get_twin.metadata = {"url": "/twins/{id}/modules/{mid}"}

    def replace_twin(
        self, id, mid, device_twin_info, if_match=None, custom_headers=None, raw=False,
        **operation_config
    ):
        """Replaces the tags and desired properties of a module twin.

        :param id: The unique identifier of the device.
        :type id: str
        :param mid: The unique identifier of the module.
        :type mid: str
        :param device_twin_info: The module twin info that will replace the existing info.
        :type device_twin_info: ~azure.iot.hubservice.protocol.models.TwinData
        :param if_match: The string representing a weak ETag for the module twin, as per
         RFC7232, or the wildcard "*".
        :type if_match: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: TwinData or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.TwinData or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.replace_twin.metadata["url"], id=id, mid=mid)
        body_content = self._serialize.body(device_twin_info, "TwinData")
        request = self._client.put(
            url,
            self._query_parameters(),
            self._header_parameters(custom_headers, if_match, has_body=True),
            body_content,
        )
        return self._send(request, [200], "TwinData", raw, **operation_config)

    replace_twin.metadata = {"url": "/twins/{id}/modules/{mid}"}

    def update_twin(
        self, id, mid, device_twin_info, if_match=None, custom_headers=None, raw=False,
        **operation_config
    ):
        """Updates the tags and desired properties of a module twin.

        :param id: The unique identifier of the device.
        :type id: str
        :param mid: The unique identifier of the module.
        :type mid: str
        :param device_twin_info: The module twin info containing the tags and desired
         properties to be updated.
        :type device_twin_info: ~azure.iot.hubservice.protocol.models.TwinData
        :param if_match: The string representing a weak ETag for the module twin, as per
         RFC7232, or the wildcard "*".
        :type if_match: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: TwinData or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.TwinData or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.update_twin.metadata["url"], id=id, mid=mid)
        body_content = self._serialize.body(device_twin_info, "TwinData")
        request = self._client.patch(
            url,
            self._query_parameters(),
            self._header_parameters(custom_headers, if_match, has_body=True),
            body_content,
        )
        return self._send(request, [200], "TwinData", raw, **operation_config)

    update_twin.metadata = {"url": "/twins/{id}/modules/{mid}"}

    def invoke_method(
        self, device_id, module_id, direct_method_request, custom_headers=None, raw=False,
        **operation_config
    ):
        """Invoke a direct method on a module of a device.

        :param device_id: The unique identifier of the device.
        :type device_id: str
        :param module_id: The unique identifier of the module.
        :type module_id: str
        :param direct_method_request: The parameters to execute a direct method on the module.
        :type direct_method_request:
         ~azure.iot.hubservice.protocol.models.CloudToDeviceMethodRequest
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :return: CloudToDeviceMethodResult or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.CloudToDeviceMethodResult or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(
            self.invoke_method.metadata["url"], deviceId=device_id, moduleId=module_id
        )
        body_content = self._serialize.body(direct_method_request, "CloudToDeviceMethodRequest")
        request = self._client.post(
            url,
            self._query_parameters(),
            self._header_parameters(custom_headers, has_body=True),
            body_content,
        )
        return self._send(request, [200], "CloudToDeviceMethodResult", raw, **operation_config)

    invoke_method.metadata = {"url": "/twins/{deviceId}/modules/{moduleId}/methods"}
