# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import os
from azure.iot.hubservice import IoTHubServiceClient
from azure.iot.hubservice.models import JobRequestOptions, StorageAuthenticationType

iothub_connection_str = os.getenv("IOTHUB_CONNECTION_STRING")
output_container_uri = os.getenv("STORAGE_CONTAINER_SAS_URI")


try:
    # Create IoTHubServiceClient
    service_client = IoTHubServiceClient.from_connection_string(iothub_connection_str)

    # Export the registry to devices.txt in the container, using key based authentication
    job = service_client.jobs.create_export_devices_job(output_container_uri, exclude_keys=True)
    print("Submitted export job {0}, status {1}".format(job.job_id, job.status))

    # Export again to a named blob, letting IoT Hub use its managed identity
    options = JobRequestOptions(
        blob_name="registry-backup.txt",
        authentication_type=StorageAuthenticationType.identity_based,
    )
    job = service_client.jobs.create_export_devices_job(
        output_container_uri, exclude_keys=True, options=options
    )
    print("Submitted export job {0}".format(job.job_id))

    # The service runs jobs in the background; read back their status
    for job in service_client.jobs.get_import_export_jobs():
        print("{0}: {1} {2}% ({3})".format(job.job_id, job.type, job.progress, job.status))

    job = service_client.jobs.get_import_export_job(job.job_id)
    if job.status not in ("completed", "failed", "cancelled"):
        service_client.jobs.cancel_import_export_job(job.job_id)
        print("Cancelled job {0}".format(job.job_id))

except Exception as ex:
    print("Unexpected error {0}".format(ex))
except KeyboardInterrupt:
    print("jobs_client_sample stopped")
