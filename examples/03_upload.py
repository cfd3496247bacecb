"""
Upload files to Openload
"""
import io
import os
from openloadpy import OpenloadClient


def main():
    with OpenloadClient(os.environ["OPENLOAD_LOGIN"], os.environ["OPENLOAD_KEY"]) as ol:

        # Simple upload to root
        result = ol.upload("document.pdf")
        print(f"Uploaded: {result.url}")

        # Upload to specific folder
        result = ol.upload("report.pdf", folder_id="1234")
        print(f"Uploaded to folder 1234: {result.id}")

        # Upload from memory
        data = io.BytesIO(b"hello world")
        result = ol.upload_from(data, "hello.txt")
        print(f"Uploaded {result.name}: {result.size} bytes, sha1 {result.sha1}")


if __name__ == "__main__":
    main()
