"""
Download a file: ticket, wait, captcha, link
"""
import os
import sys
import time
from openloadpy import OpenloadClient


def main(file_id):
    with OpenloadClient(os.environ["OPENLOAD_LOGIN"], os.environ["OPENLOAD_KEY"]) as ol:
        ticket = ol.download_ticket(file_id)

        captcha = None
        if ticket.requires_captcha:
            print(f"Solve captcha: {ticket.captcha_url}")
            captcha = input("Captcha: ")

        print(f"Waiting {ticket.wait_time}s...")
        time.sleep(ticket.wait_time)

        link = ol.download_link(file_id, ticket.ticket, captcha)
        print(f"{link.name} ({link.size} bytes): {link.url}")


if __name__ == "__main__":
    main(sys.argv[1])
