# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import os
from azure.iot.hubservice import IoTHubServiceClient
from azure.iot.hubservice.models import (
    DeviceIdentity,
    AuthenticationMechanism,
    SymmetricKey,
    TwinData,
    TwinProperties,
    IfMatchPrecondition,
)
from azure.iot.hubservice.exceptions import IoTHubServiceError, PreconditionFailedError

iothub_connection_str = os.getenv("IOTHUB_CONNECTION_STRING")
device_id = os.getenv("IOTHUB_NEW_DEVICE_ID")


def print_device_info(title, device):
    print(title + ":")
    print("device_id                  = {0}".format(device.device_id))
    print("authentication.type        = {0}".format(device.authentication.type))
    print("etag                       = {0}".format(device.etag))
    print("status                     = {0}".format(device.status))
    print("status_reason              = {0}".format(device.status_reason))
    print("")


try:
    # Create IoTHubServiceClient
    service_client = IoTHubServiceClient.from_connection_string(iothub_connection_str)

    # Create a device with SAS authentication
    device = DeviceIdentity(
        device_id=device_id,
        status="enabled",
        authentication=AuthenticationMechanism(
            type="sas",
            symmetric_key=SymmetricKey(
                primary_key="aCd1RIQGGOHKjW8XPnUxhjiNkV0ZpNvl1KCXAiyT0ZU=",
                secondary_key="6IZtXLcvPlfN/sWsyHYAnRsLXSa47U7S3ZbdzuOc1QM=",
            ),
        ),
    )
    device = service_client.devices.create_or_update_identity(device)
    print_device_info("create_or_update_identity", device)

    # Keep a second copy, as another writer would
    other_copy = service_client.devices.get_identity(device_id)

    # Conditional update: only applies if nobody changed the device since we read it
    device.status_reason = "Updated by the sample"
    device = service_client.devices.create_or_update_identity(
        device, IfMatchPrecondition.IF_MATCH
    )
    print_device_info("Conditional update", device)

    # The other copy is now stale, so a conditional update is rejected
    other_copy.status = "disabled"
    try:
        service_client.devices.create_or_update_identity(
            other_copy, IfMatchPrecondition.IF_MATCH
        )
    except PreconditionFailedError as ex:
        print("Stale update rejected: {0}".format(ex))
        print("")

    # Update the desired properties of the twin, guarded by the twin etag
    twin = service_client.devices.get_twin(device_id)
    twin_patch = TwinData(
        device_id=device_id,
        etag=twin.etag,
        properties=TwinProperties(desired={"telemetryInterval": 30}),
    )
    twin = service_client.devices.update_twin(twin_patch, IfMatchPrecondition.IF_MATCH)
    print("Twin desired properties: {0}".format(twin.properties.desired))
    print("")

    # Delete the device, again only if it was not changed in between
    service_client.devices.delete_identity(device, IfMatchPrecondition.IF_MATCH)
    print("Device {0} deleted".format(device_id))

except IoTHubServiceError as ex:
    print("IoT Hub error {0}: {1}".format(ex.status_code, ex.message))
except Exception as ex:
    print("Unexpected error {0}".format(ex))
except KeyboardInterrupt:
    print("devices_client_sample stopped")
