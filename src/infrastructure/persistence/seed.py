"""
infrastructure.persistence.seed - Sample fixtures for a fresh database.

Loads 22 users, 22 devices, 20 metrics, 29 readings and 22
recommendations, plus one ownership link per user (device N is user N's,
as the device display names say). Readings and recommendations refer to
fixture rows by their 1-based position in the lists below; the actual
row IDs are looked up after insert.
"""

from __future__ import annotations

import logging

from domain.models import SeedReport
from infrastructure.persistence.columns import value_to_db
from infrastructure.persistence.connection import AsyncSQLiteConnection

logger = logging.getLogger(__name__)

# (FirstName, LastName, Age, Email, Gender, RegistrationDate)
USERS = [
    ("Alice", "Smith", 30, "alice.smith@example.com", "Female", "2023-01-15"),
    ("Bob", "Johnson", 45, "bob.j@example.com", "Male", "2023-01-20"),
    ("Charlie", "Brown", 22, "charlie.b@example.com", "Male", "2023-02-01"),
    ("Diana", "Prince", 35, "diana.p@example.com", "Female", "2023-02-10"),
    ("Eve", "Adams", 28, "eve.a@example.com", "Female", "2023-03-05"),
    ("Frank", "White", 50, "frank.w@example.com", "Male", "2023-03-12"),
    ("Grace", "Lee", 25, "grace.l@example.com", "Female", "2023-04-01"),
    ("Henry", "Green", 40, "henry.g@example.com", "Male", "2023-04-18"),
    ("Ivy", "King", 33, "ivy.k@example.com", "Female", "2023-05-01"),
    ("Jack", "Black", 55, "jack.b@example.com", "Male", "2023-05-20"),
    ("Karen", "Hall", 29, "karen.h@example.com", "Female", "2023-06-01"),
    ("Liam", "Scott", 38, "liam.s@example.com", "Male", "2023-06-15"),
    ("Mia", "Taylor", 26, "mia.t@example.com", "Female", "2023-07-01"),
    ("Noah", "Clark", 42, "noah.c@example.com", "Male", "2023-07-10"),
    ("Olivia", "Lewis", 31, "olivia.l@example.com", "Female", "2023-08-01"),
    ("Peter", "Walker", 48, "peter.w@example.com", "Male", "2023-08-18"),
    ("Quinn", "Young", 24, "quinn.y@example.com", "Female", "2023-09-01"),
    ("Ryan", "Hill", 36, "ryan.h@example.com", "Male", "2023-09-10"),
    ("Sophia", "Baker", 27, "sophia.b@example.com", "Female", "2023-10-01"),
    ("Tom", "Harris", 52, "tom.h@example.com", "Male", "2023-10-15"),
    ("Ursula", "Davis", 39, "ursula.d@example.com", "Female", "2023-11-01"),
    ("Victor", "Miller", 41, "victor.m@example.com", "Male", "2023-11-10"),
]

# (Model, DeviceName)
DEVICES = [
    ("FitBit Charge 5", "Alice's FitBit"),
    ("Apple Watch Series 8", "Bob's Apple Watch"),
    ("Garmin Forerunner 955", "Charlie's Garmin"),
    ("Samsung Galaxy Watch 5", "Diana's Galaxy Watch"),
    ("Whoop 4.0", "Eve's Whoop"),
    ("FitBit Sense 2", "Frank's FitBit"),
    ("Apple Watch SE", "Grace's Apple Watch"),
    ("Garmin Fenix 7", "Henry's Garmin"),
    ("Oura Ring Gen3", "Ivy's Oura Ring"),
    ("FitBit Versa 4", "Jack's FitBit"),
    ("Polar Vantage V2", "Karen's Polar Watch"),
    ("Xiaomi Mi Band 7", "Liam's Mi Band"),
    ("Huawei Watch GT 3", "Mia's Huawei Watch"),
    ("Google Pixel Watch", "Noah's Pixel Watch"),
    ("Withings ScanWatch", "Olivia's ScanWatch"),
    ("FitBit Inspire 3", "Peter's FitBit"),
    ("Apple Watch Ultra", "Quinn's Apple Watch Ultra"),
    ("Garmin Venu 2 Plus", "Ryan's Garmin Venu"),
    ("Samsung Galaxy Watch 6", "Sophia's Galaxy Watch"),
    ("Whoop 4.0", "Tom's Whoop"),
    ("FitBit Charge 5", "Ursula's FitBit"),
    ("Apple Watch Series 8", "Victor's Apple Watch"),
]

# (Unit, MetricName)
METRICS = [
    ("bpm", "Heart Rate"),
    ("steps", "Steps Count"),
    ("hours", "Sleep Duration"),
    ("kcal", "Calories Burned"),
    ("km", "Distance Walked/Run"),
    ("minutes", "Active Minutes"),
    ("g/dL", "Blood Glucose"),
    ("mmHg", "Blood Pressure (Systolic)"),
    ("mmHg", "Blood Pressure (Diastolic)"),
    ("%", "SpO2 Level"),
    ("mg/dL", "Cholesterol"),
    ("kg", "Weight"),
    ("cm", "Height"),
    ("score", "Stress Level"),
    ("score", "Recovery Score"),
    ("breaths/min", "Respiratory Rate"),
    ("count", "Workouts Completed"),
    ("count", "Water Intake (glasses)"),
    ("count", "Stairs Climbed"),
    ("score", "Mindfulness Minutes"),
]

# (Value, Timestamp, user #, metric #, device #)
READINGS = [
    ("75.5", "2024-07-20 08:00:00", 1, 1, 1),
    ("10245.0", "2024-07-20 18:30:00", 1, 2, 1),
    ("7.2", "2024-07-20 07:00:00", 1, 3, 1),
    ("1500.0", "2024-07-20 20:00:00", 1, 4, 1),
    ("68.0", "2024-07-20 09:00:00", 2, 1, 2),
    ("8500.0", "2024-07-20 17:00:00", 2, 2, 2),
    ("6.8", "2024-07-20 06:30:00", 2, 3, 2),
    ("1800.0", "2024-07-20 19:00:00", 2, 4, 2),
    ("120.0", "2024-07-20 10:00:00", 3, 8, 3),
    ("80.0", "2024-07-20 10:00:00", 3, 9, 3),
    ("98.5", "2024-07-20 11:00:00", 4, 10, 4),
    ("5.1", "2024-07-20 12:00:00", 5, 7, 5),
    ("70.0", "2024-07-20 13:00:00", 6, 1, 6),
    ("11000.0", "2024-07-20 16:00:00", 7, 2, 7),
    ("7.5", "2024-07-20 07:30:00", 8, 3, 8),
    ("65.0", "2024-07-20 08:15:00", 9, 1, 9),
    ("9000.0", "2024-07-20 17:45:00", 10, 2, 10),
    ("6.9", "2024-07-20 06:45:00", 11, 3, 11),
    ("1600.0", "2024-07-20 21:00:00", 12, 4, 12),
    ("72.0", "2024-07-20 09:30:00", 13, 1, 13),
    ("9500.0", "2024-07-20 18:00:00", 14, 2, 14),
    ("7.0", "2024-07-20 07:15:00", 15, 3, 15),
    ("140.0", "2024-07-20 10:30:00", 16, 8, 16),
    ("85.0", "2024-07-20 10:30:00", 17, 9, 17),
    ("99.0", "2024-07-20 11:30:00", 18, 10, 18),
    ("5.5", "2024-07-20 12:30:00", 19, 7, 19),
    ("68.0", "2024-07-20 13:30:00", 20, 1, 20),
    ("10500.0", "2024-07-20 19:00:00", 21, 2, 21),
    ("7.1", "2024-07-20 06:50:00", 22, 3, 22),
]

# (Title, Description, user #)
RECOMMENDATIONS = [
    ("Increase Daily Steps", "Aim for 10,000 steps daily. Try taking a brisk 30-minute walk during lunch.", 1),
    ("Improve Sleep Hygiene", "Establish a consistent sleep schedule, avoid screens before bed, and create a relaxing bedtime routine.", 2),
    ("Monitor Blood Pressure", "Continue tracking your blood pressure regularly. Consult your doctor if readings are consistently high.", 3),
    ("Maintain SpO2 Levels", "Your oxygen saturation is excellent. Keep up with your regular physical activity.", 4),
    ("Manage Blood Glucose", "Continue to monitor your blood glucose levels. Focus on a balanced diet with low glycemic index foods.", 5),
    ("Regular Cardio Exercise", "Incorporate at least 30 minutes of moderate-intensity cardio most days of the week to maintain heart health.", 6),
    ("Hydration Goal", "Drink at least 8 glasses of water daily. Use a water tracking app to help you stay on track.", 7),
    ("Strength Training", "Add 2-3 days of strength training to your weekly routine to build muscle and improve metabolism.", 8),
    ("Mindfulness Practice", "Practice 10 minutes of mindfulness meditation daily to help reduce stress and improve focus.", 9),
    ("Nutritional Review", "Consider consulting a nutritionist to optimize your diet for sustained energy and overall well-being.", 10),
    ("Active Recovery", "Incorporate light activities like stretching or yoga on rest days to aid muscle recovery and flexibility.", 11),
    ("Set Realistic Goals", "Break down your fitness goals into smaller, achievable steps to maintain motivation.", 12),
    ("Vary Your Workouts", "Introduce different types of exercises (e.g., swimming, cycling) to challenge your body in new ways.", 13),
    ("Listen to Your Body", "Pay attention to signs of fatigue or overtraining. Rest is just as important as activity.", 14),
    ("Stay Consistent", "Consistency is key to long-term health improvements. Try to stick to your routine even on busy days.", 15),
    ("Explore New Trails", "If you enjoy walking/running, try exploring new parks or trails to keep your routine fresh.", 16),
    ("Track Food Intake", "Logging your food can help you identify patterns and make healthier choices.", 17),
    ("Join a Fitness Class", "Consider joining a group fitness class for motivation and to learn new exercises.", 18),
    ("Prioritize Rest", "Ensure you are getting adequate rest, especially after intense workouts, to allow your body to recover.", 19),
    ("Morning Routine", "Start your day with a short walk or light stretching to boost energy and mood.", 20),
    ("Evening Wind-Down", "Create a relaxing evening routine to prepare your body for restful sleep.", 21),
    ("Stay Hydrated", "Keep a water bottle handy throughout the day to ensure consistent hydration.", 22),
]


async def seed_database(connection: AsyncSQLiteConnection) -> SeedReport:
    """Insert the sample fixtures into an empty database.

    Skipped when the Users table already holds rows, so running it twice
    does not duplicate anything. All inserts share one transaction: a
    failure part-way leaves the database as it was.
    """
    async with connection.acquire() as conn:
        rows = await conn.execute_fetchall("SELECT COUNT(*) FROM Users")
        if rows[0][0]:
            logger.info("Users table is not empty, skipping seed.")
            return SeedReport(skipped=True)

        user_ids = []
        for row in USERS:
            cursor = await conn.execute(
                """INSERT INTO Users (FirstName, LastName, Age, Email, Gender, RegistrationDate)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                row,
            )
            user_ids.append(cursor.lastrowid)

        device_ids = []
        for row in DEVICES:
            cursor = await conn.execute(
                "INSERT INTO Device (Model, DeviceName) VALUES (?, ?)", row,
            )
            device_ids.append(cursor.lastrowid)

        metric_ids = []
        for row in METRICS:
            cursor = await conn.execute(
                "INSERT INTO HealthMetric (Unit, MetricName) VALUES (?, ?)", row,
            )
            metric_ids.append(cursor.lastrowid)

        await conn.executemany(
            """INSERT INTO HealthData (Value, Timestamp, UserID, MetricID, DeviceID)
               VALUES (?, ?, ?, ?, ?)""",
            [
                (value_to_db(value), ts, user_ids[u - 1], metric_ids[m - 1], device_ids[d - 1])
                for value, ts, u, m, d in READINGS
            ],
        )

        await conn.executemany(
            "INSERT INTO Recommendation (Title, Description, UserID) VALUES (?, ?, ?)",
            [(title, desc, user_ids[u - 1]) for title, desc, u in RECOMMENDATIONS],
        )

        await conn.executemany(
            "INSERT INTO UserDevice (UserID, DeviceID) VALUES (?, ?)",
            list(zip(user_ids, device_ids)),
        )

    report = SeedReport(
        skipped=False,
        inserted={
            "Users": len(USERS),
            "Device": len(DEVICES),
            "HealthMetric": len(METRICS),
            "HealthData": len(READINGS),
            "Recommendation": len(RECOMMENDATIONS),
            "UserDevice": len(user_ids),
        },
    )
    logger.info("Seeded sample data: %s", report.inserted)
    return report
