from __future__ import annotations

import os

from zillow.api import Environment, EnvironmentManager, EnvironmentType, ZillowClient
from zillow.util.log import configure_logging, get_logger, shutdown_logging


def main() -> None:
    configure_logging(level="DEBUG")

    EnvironmentManager.register(
        Environment(
            name=EnvironmentType.PRODUCTION,
            url_prefix="http://www.zillow.com/webservice/",
            zws_id=os.environ.get("ZWSID", ""),
        )
    )

    with ZillowClient() as client:
        client.set_logger(get_logger("zestimate_example"))

        response = client.execute("GetZestimate", {"zpid": 48749425})
        if response.is_successful():
            print("zestimate:", response.data["zestimate"]["amount"]["#text"])
        else:
            print(f"failed ({response.code}): {response.message}")

        search = client.execute(
            "GetSearchResults",
            {"address": "2114 Bigelow Ave", "citystatezip": "Seattle, WA"},
        )
        print(search.code, search.message)

    shutdown_logging()


if __name__ == "__main__":
    main()
