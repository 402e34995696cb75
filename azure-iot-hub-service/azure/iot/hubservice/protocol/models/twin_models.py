# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from msrest.serialization import Model


class TwinProperties(Model):
    """The desired and reported properties of a twin.

    :param desired: The collection of desired property key-value pairs. The keys are UTF-8
     encoded, case-sensitive and up-to 1KB in length.
    :type desired: dict[str, object]
    :param reported: The collection of reported property key-value pairs.
    :type reported: dict[str, object]
    """

    _attribute_map = {
        "desired": {"key": "desired", "type": "{object}"},
        "reported": {"key": "reported", "type": "{object}"},
    }

    def __init__(self, *, desired=None, reported=None, **kwargs):
        super(TwinProperties, self).__init__(**kwargs)
        self.desired = desired
        self.reported = reported


class TwinData(Model):
    """The state information for a device or module. This is implicitly created and deleted
    when the corresponding device or module identity is created or deleted in the IoT Hub.

    :param device_id: The unique identifier of the device in the identity registry of the IoT Hub.
    :type device_id: str
    :param module_id: The unique identifier of the module in the identity registry of the IoT Hub.
    :type module_id: str
    :param tags: The collection of key-value pairs read and written by the solution back end.
    :type tags: dict[str, object]
    :param properties: The desired and reported properties of the twin.
    :type properties: ~azure.iot.hubservice.protocol.models.TwinProperties
    :param etag: The string representing a ETag for the twin, as per RFC7232. Independent of
     the ETag of the owning identity.
    :type etag: str
    :param version: The version for the twin including tags and desired properties.
    :type version: long
    :param device_etag: The string representing a ETag for the device, as per RFC7232.
    :type device_etag: str
    :param status: The enabled status of the device. Possible values include: 'enabled',
     'disabled'
    :type status: str
    :param status_reason: The reason for the current status of the device, if any.
    :type status_reason: str
    :param status_update_time: The date and time when the status of the device was last updated.
    :type status_update_time: datetime
    :param connection_state: The connection state of the device. Possible values include:
     'Disconnected', 'Connected'
    :type connection_state: str
    :param last_activity_time: The date and time when the device last connected or received or
     sent a message.
    :type last_activity_time: datetime
    :param cloud_to_device_message_count: The number of cloud-to-device messages sent.
    :type cloud_to_device_message_count: int
    :param authentication_type: The authentication type used by the device. Possible values
     include: 'sas', 'selfSigned', 'certificateAuthority', 'none'
    :type authentication_type: str
    :param x509_thumbprint: The X509 thumbprint of the device.
    :type x509_thumbprint: ~azure.iot.hubservice.protocol.models.X509Thumbprint
    :param capabilities: The set of capabilities of the device.
    :type capabilities: ~azure.iot.hubservice.protocol.models.DeviceCapabilities
    :param device_scope: The scope of the device.
    :type device_scope: str
    :param parent_scopes: The scopes of the upper level edge devices if applicable.
    :type parent_scopes: list[str]
    :param model_id: The digital twin model id of the device, if any.
    :type model_id: str
    """

    _attribute_map = {
        "device_id": {"key": "deviceId", "type": "str"},
        "module_id": {"key": "moduleId", "type": "str"},
        "tags": {"key": "tags", "type": "{object}"},
        "properties": {"key": "properties", "type": "TwinProperties"},
        "etag": {"key": "etag", "type": "str"},
        "version": {"key": "version", "type": "long"},
        "device_etag": {"key": "deviceEtag", "type": "str"},
        "status": {"key": "status", "type": "str"},
        "status_reason": {"key": "statusReason", "type": "str"},
        "status_update_time": {"key": "statusUpdateTime", "type": "iso-8601"},
        "connection_state": {"key": "connectionState", "type": "str"},
        "last_activity_time": {"key": "lastActivityTime", "type": "iso-8601"},
        "cloud_to_device_message_count": {"key": "cloudToDeviceMessageCount", "type": "int"},
        "authentication_type": {"key": "authenticationType", "type": "str"},
        "x509_thumbprint": {"key": "x509Thumbprint", "type": "X509Thumbprint"},
        "capabilities": {"key": "capabilities", "type": "DeviceCapabilities"},
        "device_scope": {"key": "deviceScope", "type": "str"},
        "parent_scopes": {"key": "parentScopes", "type": "[str]"},
        "model_id": {"key": "modelId", "type": "str"},
    }

    def __init__(
        self,
        *,
        device_id=None,
        module_id=None,
        tags=None,
        properties=None,
        etag=None,
        version=None,
        device_etag=None,
        status=None,
        status_reason=None,
        status_update_time=None,
        connection_state=None,
        last_activity_time=None,
        cloud_to_device_message_count=None,
        authentication_type=None,
        x509_thumbprint=None,
        capabilities=None,
        device_scope=None,
        parent_scopes=None,
        model_id=None,
        **kwargs
    ):
        super(TwinData, self).__init__(**kwargs)
        self.device_id = device_id
        self.module_id = module_id
        self.tags = tags
        self.properties = properties
        self.etag = etag
        self.version = version
        self.device_etag = device_etag
        self.status = status
        self.status_reason = status_reason
        self.status_update_time = status_update_time
        self.connection_state = connection_state
        self.last_activity_time = last_activity_time
        self.cloud_to_device_message_count = cloud_to_device_message_count
        self.authentication_type = authentication_type
        self.x509_thumbprint = x509_thumbprint
        self.capabilities = capabilities
        self.device_scope = device_scope
        self.parent_scopes = parent_scopes
        self.model_id = model_id
