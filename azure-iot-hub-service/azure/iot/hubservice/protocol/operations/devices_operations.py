# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from .operations_base import OperationsBase


class DevicesOperations(OperationsBase):
    """DevicesOperations operations.

    :param client: Client for service requests.
    :param config: Configuration of service client.
    :param serializer: An object model serializer.
    :param deserializer: An object model deserializer.
    """

    def get_devices(self, top=None, custom_headers=None, raw=False, **operation_config):
        """Gets the identities of multiple devices from the IoT Hub identity registry.

        :param top: The maximum number of device identities returned by the query. Any value
         outside the range of 1-1000 is considered to be 1000.
        :type top: int
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :param operation_config: :ref:`Operation configuration overrides<msrest:optionsforoperations>`.
        :return: list or ClientRawResponse if raw=true
        :rtype: list[~azure.iot.hubservice.protocol.models.DeviceIdentity] or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.get_devices.metadata["url"])

        query_parameters = self._query_parameters()
        if top is not None:
            query_parameters["top"] = self._serialize.query("top", top, "int")

        request = self._client.get(url, query_parameters, self._header_parameters(custom_headers))
        return self._send(request, [200], "[DeviceIdentity]", raw, **operation_config)

    get_devices.metadata = {"url": "/devices"}

    def get_identity(self, id, custom_headers=None, raw=False, **operation_config):
        """Gets a device from the identity registry of the IoT Hub.

        :param id: The unique identifier of the device.
        :type id: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :param operation_config: :ref:`Operation configuration overrides<msrest:optionsforoperations>`.
        :return: DeviceIdentity or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.DeviceIdentity or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.get_identity.metadata["url"], id=id)
        request = self._client.get(
            url, self._query_parameters(), self._header_parameters(custom_headers)
        )
        return self._send(request, [200], "DeviceIdentity", raw, **operation_config)

    get_identity.metadata = {"url": "/devices/{id}"}

    def create_or_update_identity(
        self, id, device, if_match=None, custom_headers=None, raw=False, **operation_config
    ):
        """Creates or updates the identity of a device in the identity registry of the IoT Hub.

        :param id: The unique identifier of the device.
        :type id: str
        :param device: The contents of the device identity.
        :type device: ~azure.iot.hubservice.protocol.models.DeviceIdentity
        :param if_match: The string representing a weak ETag for the device identity, as per
         RFC7232, or the wildcard "*".
        :type if_match: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :param operation_config: :ref:`Operation configuration overrides<msrest:optionsforoperations>`.
        :return: DeviceIdentity or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.DeviceIdentity or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.create_or_update_identity.metadata["url"], id=id)
        body_content = self._serialize.body(device, "DeviceIdentity")
        request = self._client.put(
            url,
            self._query_parameters(),
            self._header_parameters(custom_headers, if_match, has_body=True),
            body_content,
        )
        return self._send(request, [200], "DeviceIdentity", raw, **operation_config)

    create_or_update_identity.metadata = {"url": "/devices/{id}"}

    def delete_identity(self, id, if_match=None, custom_headers=None, raw=False, **operation_config):
        """Deletes the identity of a device from the identity registry of the IoT Hub.

        :param id: The unique identifier of the device.
        :type id: str
        :param if_match: The string representing a weak ETag for the device identity, as per
         RFC7232, or the wildcard "*".
        :type if_match: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :param operation_config: :ref:`Operation configuration overrides<msrest:optionsforoperations>`.
        :return: None or ClientRawResponse if raw=true
        :rtype: None or ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.delete_identity.metadata["url"], id=id)
        request = self._client.delete(
            url, self._query_parameters(), self._header_parameters(custom_headers, if_match)
        )
        return self._send(request, [200, 204], None, raw, **operation_config)

    delete_identity.metadata = {"url": "/devices/{id}"}

    def get_twin(self, id, custom_headers=None, raw=False, **operation_config):
        """Gets the device twin.

        :param id: The unique identifier of the device.
        :type id: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :param operation_config: :ref:`Operation configuration overrides<msrest:optionsforoperations>`.
        :return: TwinData or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.TwinData or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.get_twin.metadata["url"], id=id)
        request = self._client.get(
            url, self._query_parameters(), self._header_parameters(custom_headers)
        )
        return self._send(request, [200], "TwinData", raw, **operation_config)

    get_twin.metadata = {"url": "/twins/{id}"}

    def replace_twin(
        self, id, device_twin_info, if_match=None, custom_headers=None, raw=False, **operation_config
    ):
        """Replaces the tags and desired properties of a device twin.

        :param id: The unique identifier of the device.
        :type id: str
        :param device_twin_info: The device twin info that will replace the existing info.
        :type device_twin_info: ~azure.iot.hubservice.protocol.models.TwinData
        :param if_match: The string representing a weak ETag for the device twin, as per
         RFC7232, or the wildcard "*".
        :type if_match: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :param operation_config: :ref:`Operation configuration overrides<msrest:optionsforoperations>`.
        :return: TwinData or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.TwinData or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.replace_twin.metadata["url"], id=id)
        body_content = self._serialize.body(device_twin_info, "TwinData")
        request = self._client.put(
            url,
            self._query_parameters(),
            self._header_parameters(custom_headers, if_match, has_body=True),
            body_content,
        )
        return self._send(request, [200], "TwinData", raw, **operation_config)

    replace_twin.metadata = {"url": "/twins/{id}"}

    def update_twin(
        self, id, device_twin_info, if_match=None, custom_headers=None, raw=False, **operation_config
    ):
        """Updates the tags and desired properties of a device twin.

        :param id: The unique identifier of the device.
        :type id: str
        :param device_twin_info: The device twin info containing the tags and desired
         properties to be updated.
        :type device_twin_info: ~azure.iot.hubservice.protocol.models.TwinData
        :param if_match: The string representing a weak ETag for the device twin, as per
         RFC7232, or the wildcard "*".
        :type if_match: str
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :param operation_config: :ref:`Operation configuration overrides<msrest:optionsforoperations>`.
        :return: TwinData or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.TwinData or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.update_twin.metadata["url"], id=id)
        body_content = self._serialize.body(device_twin_info, "TwinData")
        request = self._client.patch(
            url,
            self._query_parameters(),
            self._header_parameters(custom_headers, if_match, has_body=True),
            body_content,
        )
        return self._send(request, [200], "TwinData", raw, **operation_config)

    update_twin.metadata = {"url": "/twins/{id}"}

    def invoke_method(
        self, device_id, direct_method_request, custom_headers=None, raw=False, **operation_config
    ):
        """Invoke a direct method on a device.

        :param device_id: The unique identifier of the device.
        :type device_id: str
        :param direct_method_request: The parameters to execute a direct method on the device.
        :type direct_method_request:
         ~azure.iot.hubservice.protocol.models.CloudToDeviceMethodRequest
        :param dict custom_headers: headers that will be added to the request
        :param bool raw: returns the direct response alongside the deserialized response
        :param operation_config: :ref:`Operation configuration overrides<msrest:optionsforoperations>`.
        :return: CloudToDeviceMethodResult or ClientRawResponse if raw=true
        :rtype: ~azure.iot.hubservice.protocol.models.CloudToDeviceMethodResult or
         ~msrest.pipeline.ClientRawResponse
        :raises: :class:`HttpOperationError<msrest.exceptions.HttpOperationError>`
        """
        url = self._format_url(self.invoke_method.metadata["url"], deviceId=device_id)
        body_content = self._serialize.body(direct_method_request, "CloudToDeviceMethodRequest")
        request = self._client.post(
            url,
            self._query_parameters(),
            self._header_parameters(custom_headers, has_body=True),
            body_content,
        )
        return self._send(request, [200], "CloudToDeviceMethodResult", raw, **operation_config)

    invoke_method.metadata = {"url": "/twins/{deviceId}/methods"}
