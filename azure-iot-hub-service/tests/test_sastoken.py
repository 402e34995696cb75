# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest
import time
import urllib.parse
from azure.iot.hubservice.sastoken import SasToken, SasTokenError

fake_uri = "beauxbatons.academy-net"
fake_key = "Zm9vYmFy"
fake_key_name = "alohomora"


@pytest.mark.describe("SasToken")
class TestSasToken(object):
    @pytest.mark.it("Builds a service token with the resource, signature, expiry and key name")
    def test_service_token_format(self):
        token = str(SasToken(fake_uri, fake_key, fake_key_name))
        assert token.startswith("SharedAccessSignature ")
        fields = dict(
            part.split("=", 1) for part in token[len("SharedAccessSignature ") :].split("&")
        )
        assert fields["sr"] == urllib.parse.quote_plus(fake_uri)
        assert fields["skn"] == fake_key_name
        assert fields["sig"]
        assert int(fields["se"]) > int(time.time())

    @pytest.mark.it("Omits the key name when none is given")
    def test_token_without_key_name(self):
        token = str(SasToken(fake_uri, fake_key))
        assert "skn=" not in token

    @pytest.mark.it("Sets the expiry time to now plus the ttl")
    def test_expiry_time(self, mocker):
        mocker.patch.object(time, "time", return_value=1000)
        sastoken = SasToken(fake_uri, fake_key, fake_key_name, ttl=60)
        assert sastoken.expiry_time == 1060
        assert "se=1060" in str(sastoken)

    @pytest.mark.it("Builds a new token with a new expiry time on .refresh()")
    def test_refresh(self, mocker):
        mock_time = mocker.patch.object(time, "time", return_value=1000)
        sastoken = SasToken(fake_uri, fake_key, fake_key_name)
        first = str(sastoken)
        mock_time.return_value = 2000
        sastoken.refresh()
        assert sastoken.expiry_time == 2000 + sastoken.ttl
        assert str(sastoken) != first

    @pytest.mark.it("Raises a SasTokenError when the key is not valid base64")
    @pytest.mark.parametrize(
        "key", [pytest.param("not base64!", id="Invalid characters"), pytest.param(None, id="None")]
    )
    def test_invalid_key(self, key):
        with pytest.raises(SasTokenError) as e_info:
            SasToken(fake_uri, key, fake_key_name)
        assert e_info.value.cause is not None
