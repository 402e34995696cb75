# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import os
import asyncio
from azure.iot.hubservice.aio import IoTHubServiceClient
from azure.iot.hubservice.models import ModuleIdentity, IfMatchPrecondition

iothub_connection_str = os.getenv("IOTHUB_CONNECTION_STRING")
device_id = os.getenv("IOTHUB_DEVICE_ID")
module_id = "sample-module"


async def main():
    # Create the asynchronous IoTHubServiceClient
    service_client = IoTHubServiceClient.from_connection_string(iothub_connection_str)

    module = await service_client.modules.create_or_update_identity(
        ModuleIdentity(device_id=device_id, module_id=module_id, managed_by="sample")
    )
    print("Created module {0} with etag {1}".format(module.module_id, module.etag))

    modules = await service_client.modules.get_identities(device_id)
    print("Modules on {0}: {1}".format(device_id, [m.module_id for m in modules]))

    twin = await service_client.modules.get_twin(device_id, module_id)
    print("Module twin version {0}".format(twin.version))

    await service_client.modules.delete_identity(module, precondition=IfMatchPrecondition.IF_MATCH)
    print("Deleted module {0}".format(module_id))


if __name__ == "__main__":
    asyncio.run(main())
