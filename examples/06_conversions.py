"""
Media conversions and splash images
"""
import logging
import os
import sys
import openloadpy
from openloadpy import OpenloadClient, APIConfig


def main(file_id):
    openloadpy.setup_logging(logging.DEBUG)
    logging.basicConfig(level=logging.DEBUG)

    config = APIConfig.with_timeout(10.0, 60.0)
    with OpenloadClient(os.environ["OPENLOAD_LOGIN"], os.environ["OPENLOAD_KEY"], config=config) as ol:
        if ol.convert_file(file_id):
            print("Conversion requested")

        for conv in ol.running_conversions():
            print(f"{conv.name}: {conv.status} {(conv.progress or 0):.0%}")

        print(f"Splash: {ol.splash_image(file_id)}")


if __name__ == "__main__":
    main(sys.argv[1])
