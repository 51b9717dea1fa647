"""
Basic example fetching this week's timetable from Zermelo.

NOTE: The authorization code is shown in the Zermelo portal under
"Koppelingen" > "Koppel App" and can be used only once. Store the access
token if you want to run this more than once.
"""

import datetime
import logging

from zermelo import ScheduleClient, ZermeloError


def main():
    # Replace with your school identifier (the part before .zportal.nl)
    school = "your_school"
    code = "123 456 789 012"

    logging.basicConfig(level=logging.INFO)

    try:
        with ScheduleClient.authenticate(school, code) as client:
            print(f"Access token: {client.access_token}")

            today = datetime.datetime.now().astimezone()
            monday = (today - datetime.timedelta(days=today.weekday())).replace(
                hour=0, minute=0, second=0, microsecond=0
            )
            appointments = client.fetch_appointments(
                monday, monday + datetime.timedelta(days=7)
            )

            for appointment in appointments:
                if appointment.cancelled:
                    continue
                start = appointment.start_datetime
                when = f"{start:%a %H:%M}" if start else "--- --:--"
                print(
                    f"{when} "
                    f"{', '.join(appointment.subjects or [])} "
                    f"in {', '.join(appointment.locations or [])} "
                    f"({appointment.appointment_type})"
                )
    except ZermeloError as e:
        print(f"An error occurred: {e}")


if __name__ == "__main__":
    main()
