"""
Basic usage - Account info and root folder listing
"""
import os
from openloadpy import OpenloadClient


def main():
    login = os.environ["OPENLOAD_LOGIN"]
    key = os.environ["OPENLOAD_KEY"]

    with OpenloadClient(login, key) as ol:

        # Account info
        info = ol.account_info()
        print(info)

        # List root folder
        listing = ol.list_folder()
        print("\nFolders:")
        for folder in listing.folders:
            print(f"  [{folder.id}] {folder.name}")
        print("\nFiles:")
        for f in listing.files:
            print(f"  {f.name} ({f.size} bytes) {f.link}")


if __name__ == "__main__":
    main()
