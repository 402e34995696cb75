# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from msrest.serialization import Model


class PropertyContainer(Model):
    """The desired and reported properties of the twin.

    :param desired: The collection of desired property key-value pairs.
    :type desired: dict[str, object]
    :param reported: The collection of reported property key-value pairs.
    :type reported: dict[str, object]
    """

    _attribute_map = {
        "desired": {"key": "desired", "type": "{object}"},
        "reported": {"key": "reported", "type": "{object}"},
    }

    def __init__(self, *, desired=None, reported=None, **kwargs):
        super(PropertyContainer, self).__init__(**kwargs)
        self.desired = desired
        self.reported = reported


class ExportImportDevice(Model):
    """One entry of a bulk registry operation.

    :param id: The unique identifier of the device.
    :type id: str
    :param module_id: The unique identifier of the module, if applicable.
    :type module_id: str
    :param e_tag: The string representing a weak ETag for the device RFC7232. The value is
     only used if import mode is updateIfMatchETag, in that case the import operation is
     performed only if this ETag matches the value maintained by the server.
    :type e_tag: str
    :param import_mode: The type of registry operation and ETag preferences. Possible values
     include: 'create', 'update', 'updateIfMatchETag', 'delete', 'deleteIfMatchETag',
     'updateTwin', 'updateTwinIfMatchETag'
    :type import_mode: str or ~azure.iot.hubservice.protocol.models.ImportMode
    :param status: The status of the module. If disabled, the module cannot connect to the
     service. Possible values include: 'enabled', 'disabled'
    :type status: str
    :param status_reason: The 128 character-long string that stores the reason for the device
     identity status.
    :type status_reason: str
    :param authentication: The authentication mechanism used by the module.
    :type authentication: ~azure.iot.hubservice.protocol.models.AuthenticationMechanism
    :param twin_etag: The string representing a weak ETag for the device twin RFC7232.
    :type twin_etag: str
    :param tags: The JSON document read and written by the solution back end.
    :type tags: dict[str, object]
    :param properties: The desired and reported properties for the device.
    :type properties: ~azure.iot.hubservice.protocol.models.PropertyContainer
    :param capabilities: The status of capabilities enabled on the device.
    :type capabilities: ~azure.iot.hubservice.protocol.models.DeviceCapabilities
    :param device_scope: The scope of the device.
    :type device_scope: str
    :param parent_scopes: The scopes of the upper level edge devices if applicable.
    :type parent_scopes: list[str]
    """

    _attribute_map = {
        "id": {"key": "id", "type": "str"},
        "module_id": {"key": "moduleId", "type": "str"},
        "e_tag": {"key": "eTag", "type": "str"},
        "import_mode": {"key": "importMode", "type": "str"},
        "status": {"key": "status", "type": "str"},
        "status_reason": {"key": "statusReason", "type": "str"},
        "authentication": {"key": "authentication", "type": "AuthenticationMechanism"},
        "twin_etag": {"key": "twinETag", "type": "str"},
        "tags": {"key": "tags", "type": "{object}"},
        "properties": {"key": "properties", "type": "PropertyContainer"},
        "capabilities": {"key": "capabilities", "type": "DeviceCapabilities"},
        "device_scope": {"key": "deviceScope", "type": "str"},
        "parent_scopes": {"key": "parentScopes", "type": "[str]"},
    }

    def __init__(
        self,
        *,
        id=None,
        module_id=None,
        e_tag=None,
        import_mode=None,
        status=None,
        status_reason=None,
        authentication=None,
        twin_etag=None,
        tags=None,
        properties=None,
        capabilities=None,
        device_scope=None,
        parent_scopes=None,
        **kwargs
    ):
        super(ExportImportDevice, self).__init__(**kwargs)
        self.id = id
        self.module_id = module_id
        self.e_tag = e_tag
        self.import_mode = import_mode
        self.status = status
        self.status_reason = status_reason
        self.authentication = authentication
        self.twin_etag = twin_etag
        self.tags = tags
        self.properties = properties
        self.capabilities = capabilities
        self.device_scope = device_scope
        self.parent_scopes = parent_scopes


class DeviceRegistryOperationError(Model):
    """The device registry operation error details.

    :param device_id: The unique identifier of the device.
    :type device_id: str
    :param error_code: The error code.
    :type error_code: str
    :param error_status: The details of the error.
    :type error_status: str
    :param module_id: The unique identifier of the module, if applicable.
    :type module_id: str
    :param operation: The type of the operation that failed.
    :type operation: str
    """

    _attribute_map = {
        "device_id": {"key": "deviceId", "type": "str"},
        "error_code": {"key": "errorCode", "type": "str"},
        "error_status": {"key": "errorStatus", "type": "str"},
        "module_id": {"key": "moduleId", "type": "str"},
        "operation": {"key": "operation", "type": "str"},
    }

    def __init__(
        self,
        *,
        device_id=None,
        error_code=None,
        error_status=None,
        module_id=None,
        operation=None,
        **kwargs
    ):
        super(DeviceRegistryOperationError, self).__init__(**kwargs)
        self.device_id = device_id
        self.error_code = error_code
        self.error_status = error_status
        self.module_id = module_id
        self.operation = operation


class DeviceRegistryOperationWarning(Model):
    """The device registry operation warning details.

    :param device_id: The unique identifier of the device.
    :type device_id: str
    :param warning_code: The warning code.
    :type warning_code: str
    :param warning_status: The details of the warning.
    :type warning_status: str
    """

    _attribute_map = {
        "device_id": {"key": "deviceId", "type": "str"},
        "warning_code": {"key": "warningCode", "type": "str"},
        "warning_status": {"key": "warningStatus", "type": "str"},
    }

    def __init__(self, *, device_id=None, warning_code=None, warning_status=None, **kwargs):
        super(DeviceRegistryOperationWarning, self).__init__(**kwargs)
        self.device_id = device_id
        self.warning_code = warning_code
        self.warning_status = warning_status


class BulkRegistryOperationResult(Model):
    """The result of the bulk registry operation.

    :param is_successful: The operation result.
    :type is_successful: bool
    :param errors: The device registry operation errors.
    :type errors: list[~azure.iot.hubservice.protocol.models.DeviceRegistryOperationError]
    :param warnings: The device registry operation warnings.
    :type warnings: list[~azure.iot.hubservice.protocol.models.DeviceRegistryOperationWarning]
    """

    _attribute_map = {
        "is_successful": {"key": "isSuccessful", "type": "bool"},
        "errors": {"key": "errors", "type": "[DeviceRegistryOperationError]"},
        "warnings": {"key": "warnings", "type": "[DeviceRegistryOperationWarning]"},
    }

    def __init__(self, *, is_successful=None, errors=None, warnings=None, **kwargs):
        super(BulkRegistryOperationResult, self).__init__(**kwargs)
        self.is_successful = is_successful
        self.errors = errors
        self.warnings = warnings
