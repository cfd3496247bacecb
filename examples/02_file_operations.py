"""
File operations - info, rename, delete
"""
import os
import sys
from openloadpy import OpenloadClient, APIError


def main(file_ids):
    with OpenloadClient(os.environ["OPENLOAD_LOGIN"], os.environ["OPENLOAD_KEY"]) as ol:

        # Batch info: unknown ids may be missing from the result
        infos = ol.files_info(file_ids)
        for file_id in file_ids:
            info = infos.get(file_id)
            if info is None:
                print(f"{file_id}: not reported")
            elif not info.is_available:
                print(f"{file_id}: unavailable (status {info.status})")
            else:
                print(f"{file_id}: {info.name} {info.size} bytes")

        # Rename the first file
        first = file_ids[0]
        if ol.rename_file(first, "renamed.bin"):
            print(f"Renamed {first}")

        # Delete, reporting API errors
        try:
            ol.delete_file(first)
        except APIError as e:
            print(f"Delete failed ({e.status}): {e}")


if __name__ == "__main__":
    main(sys.argv[1:])
