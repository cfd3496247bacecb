"""
Remote upload and status polling
"""
import os
import sys
import time
from openloadpy import OpenloadClient


def main(url):
    with OpenloadClient(os.environ["OPENLOAD_LOGIN"], os.environ["OPENLOAD_KEY"]) as ol:
        remote = ol.remote_upload(url)
        print(f"Remote upload {remote.id} into folder {remote.folderid}")

        while True:
            statuses = ol.remote_upload_status(upload_id=remote.id)
            status = statuses.get(str(remote.id))
            if status is None:
                print("Not reported yet")
            else:
                print(f"{status.status}: {status.progress:.0%}")
                if status.status in ("finished", "error"):
                    break
            time.sleep(5)

        if status.is_finished:
            print(f"File: {status.url}")


if __name__ == "__main__":
    main(sys.argv[1])
