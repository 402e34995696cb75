# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from msrest.serialization import Model


class SymmetricKey(Model):
    """The symmetric keys of a device or module identity.

    :param primary_key: The base64 encoded primary key.
    :type primary_key: str
    :param secondary_key: The base64 encoded secondary key.
    :type secondary_key: str
    """

    _attribute_map = {
        "primary_key": {"key": "primaryKey", "type": "str"},
        "secondary_key": {"key": "secondaryKey", "type": "str"},
    }

    def __init__(self, *, primary_key=None, secondary_key=None, **kwargs):
        super(SymmetricKey, self).__init__(**kwargs)
        self.primary_key = primary_key
        self.secondary_key = secondary_key


class X509Thumbprint(Model):
    """The X509 thumbprints of a device or module identity.

    :param primary_thumbprint: The X509 client certificate primary thumbprint.
    :type primary_thumbprint: str
    :param secondary_thumbprint: The X509 client certificate secondary thumbprint.
    :type secondary_thumbprint: str
    """

    _attribute_map = {
        "primary_thumbprint": {"key": "primaryThumbprint", "type": "str"},
        "secondary_thumbprint": {"key": "secondaryThumbprint", "type": "str"},
    }

    def __init__(self, *, primary_thumbprint=None, secondary_thumbprint=None, **kwargs):
        super(X509Thumbprint, self).__init__(**kwargs)
        self.primary_thumbprint = primary_thumbprint
        self.secondary_thumbprint = secondary_thumbprint


class AuthenticationMechanism(Model):
    """The authentication mechanism of a device or module identity.

    :param symmetric_key: The primary and secondary keys used for SAS based authentication.
    :type symmetric_key: ~azure.iot.hubservice.protocol.models.SymmetricKey
    :param x509_thumbprint: The primary and secondary x509 thumbprints used for x509 based
     authentication.
    :type x509_thumbprint: ~azure.iot.hubservice.protocol.models.X509Thumbprint
    :param type: The type of authentication used to connect to the service. Possible values
     include: 'sas', 'selfSigned', 'certificateAuthority', 'none'
    :type type: str or ~azure.iot.hubservice.protocol.models.AuthenticationType
    """

    _attribute_map = {
        "symmetric_key": {"key": "symmetricKey", "type": "SymmetricKey"},
        "x509_thumbprint": {"key": "x509Thumbprint", "type": "X509Thumbprint"},
        "type": {"key": "type", "type": "str"},
    }

    def __init__(self, *, symmetric_key=None, x509_thumbprint=None, type=None, **kwargs):
        super(AuthenticationMechanism, self).__init__(**kwargs)
        self.symmetric_key = symmetric_key
        self.x509_thumbprint = x509_thumbprint
        self.type = type


class DeviceCapabilities(Model):
    """The status of capabilities enabled on the device.

    :param iot_edge: The property that determines if the device is an edge device or not.
    :type iot_edge: bool
    """

    _attribute_map = {"iot_edge": {"key": "iotEdge", "type": "bool"}}

    def __init__(self, *, iot_edge=None, **kwargs):
        super(DeviceCapabilities, self).__init__(**kwargs)
        self.iot_edge = iot_edge


class DeviceIdentity(Model):
    """A device identity in the IoT Hub registry.

    :param device_id: The unique identifier of the device.
    :type device_id: str
    :param generation_id: The IoT Hub generated, case-sensitive string used to distinguish
     devices with the same deviceId, when they have been deleted and re-created.
    :type generation_id: str
    :param etag: The string representing a weak ETag for the device identity.
    :type etag: str
    :param connection_state: The state of the device. Possible values include:
     'Disconnected', 'Connected'
    :type connection_state: str or ~azure.iot.hubservice.protocol.models.DeviceConnectionState
    :param status: The status of the device. Possible values include: 'enabled', 'disabled'
    :type status: str or ~azure.iot.hubservice.protocol.models.DeviceStatus
    :param status_reason: The reason for the current status of the device, if any.
    :type status_reason: str
    :param connection_state_updated_time: The date and time the connection state was last
     updated.
    :type connection_state_updated_time: datetime
    :param status_updated_time: The date and time when the status field was last updated.
    :type status_updated_time: datetime
    :param last_activity_time: The date and last time the device last connected, received or
     sent a message.
    :type last_activity_time: datetime
    :param cloud_to_device_message_count: The number of cloud-to-device messages sent.
    :type cloud_to_device_message_count: int
    :param authentication: The authentication mechanism used by the device.
    :type authentication: ~azure.iot.hubservice.protocol.models.AuthenticationMechanism
    :param capabilities: The set of capabilities of the device.
    :type capabilities: ~azure.iot.hubservice.protocol.models.DeviceCapabilities
    :param device_scope: The scope of the device. Auto-generated and immutable for edge
     devices; modifiable in leaf devices to create a child/parent relationship.
    :type device_scope: str
    :param parent_scopes: The scopes of the upper level edge devices if applicable.
    :type parent_scopes: list[str]
    """

    _attribute_map = {
        "device_id": {"key": "deviceId", "type": "str"},
        "generation_id": {"key": "generationId", "type": "str"},
        "etag": {"key": "etag", "type": "str"},
        "connection_state": {"key": "connectionState", "type": "str"},
        "status": {"key": "status", "type": "str"},
        "status_reason": {"key": "statusReason", "type": "str"},
        "connection_state_updated_time": {"key": "connectionStateUpdatedTime", "type": "iso-8601"},
        "status_updated_time": {"key": "statusUpdatedTime", "type": "iso-8601"},
        "last_activity_time": {"key": "lastActivityTime", "type": "iso-8601"},
        "cloud_to_device_message_count": {"key": "cloudToDeviceMessageCount", "type": "int"},
        "authentication": {"key": "authentication", "type": "AuthenticationMechanism"},
        "capabilities": {"key": "capabilities", "type": "DeviceCapabilities"},
        "device_scope": {"key": "deviceScope", "type": "str"},
        "parent_scopes": {"key": "parentScopes", "type": "[str]"},
    }

    def __init__(
        self,
        *,
        device_id=None,
        generation_id=None,
        etag=None,
        connection_state=None,
        status=None,
        status_reason=None,
        connection_state_updated_time=None,
        status_updated_time=None,
        last_activity_time=None,
        cloud_to_device_message_count=None,
        authentication=None,
        capabilities=None,
        device_scope=None,
        parent_scopes=None,
        **kwargs
    ):
        super(DeviceIdentity, self).__init__(**kwargs)
        self.device_id = device_id
        self.generation_id = generation_id
        self.etag = etag
        self.connection_state = connection_state
        self.status = status
        self.status_reason = status_reason
        self.connection_state_updated_time = connection_state_updated_time
        self.status_updated_time = status_updated_time
        self.last_activity_time = last_activity_time
        self.cloud_to_device_message_count = cloud_to_device_message_count
        self.authentication = authentication
        self.capabilities = capabilities
        self.device_scope = device_scope
        self.parent_scopes = parent_scopes


class ModuleIdentity(Model):
    """A module identity, which always belongs to exactly one device identity.

    :param module_id: The unique identifier of the module.
    :type module_id: str
    :param managed_by: Identifies who manages this module. For instance, this value is
     "IotEdge" if the edge runtime owns this module.
    :type managed_by: str
    :param device_id: The unique identifier of the device.
    :type device_id: str
    :param generation_id: The IoT Hub generated, case-sensitive string used to distinguish
     modules with the same moduleId, when they have been deleted and re-created.
    :type generation_id: str
    :param etag: The string representing a weak ETag for the module.
    :type etag: str
    :param connection_state: The connection state of the module. Possible values include:
     'Disconnected', 'Connected'
    :type connection_state: str or ~azure.iot.hubservice.protocol.models.DeviceConnectionState
    :param connection_state_updated_time: The date and time the connection state was last
     updated.
    :type connection_state_updated_time: datetime
    :param last_activity_time: The date and time the module last connected, received or sent
     a message.
    :type last_activity_time: datetime
    :param cloud_to_device_message_count: The number of cloud-to-module messages sent.
    :type cloud_to_device_message_count: int
    :param authentication: The authentication mechanism used by the module.
    :type authentication: ~azure.iot.hubservice.protocol.models.AuthenticationMechanism
    """

    _attribute_map = {
        "module_id": {"key": "moduleId", "type": "str"},
        "managed_by": {"key": "managedBy", "type": "str"},
        "device_id": {"key": "deviceId", "type": "str"},
        "generation_id": {"key": "generationId", "type": "str"},
        "etag": {"key": "etag", "type": "str"},
        "connection_state": {"key": "connectionState", "type": "str"},
        "connection_state_updated_time": {"key": "connectionStateUpdatedTime", "type": "iso-8601"},
        "last_activity_time": {"key": "lastActivityTime", "type": "iso-8601"},
        "cloud_to_device_message_count": {"key": "cloudToDeviceMessageCount", "type": "int"},
        "authentication": {"key": "authentication", "type": "AuthenticationMechanism"},
    }

    def __init__(
        self,
        *,
        module_id=None,
        managed_by=None,
        device_id=None,
        generation_id=None,
        etag=None,
        connection_state=None,
        connection_state_updated_time=None,
        last_activity_time=None,
        cloud_to_device_message_count=None,
        authentication=None,
        **kwargs
    ):
        super(ModuleIdentity, self).__init__(**kwargs)
        self.module_id = module_id
        self.managed_by = managed_by
        self.device_id = device_id
        self.generation_id = generation_id
        self.etag = etag
        self.connection_state = connection_state
        self.connection_state_updated_time = connection_state_updated_time
        self.last_activity_time = last_activity_time
        self.cloud_to_device_message_count = cloud_to_device_message_count
        self.authentication = authentication
