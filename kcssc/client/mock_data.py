"""
Built-in sample data, used when no backend is configured and as the
fallback when the backend is unreachable. The same records seed the
database (scripts/init_db.py --seed).
"""
from typing import List

from kcssc.schemas import EventResponse, ProgramResponse, PhotoResponse
from kcssc.schemas.program import recurrence_fields
from kcssc.services.schedule import Recurrence

EVENTS = [
    {"id": 1, "title": "Lunar New Year Celebration", "date": "January 25, 2025", "time": "11:00 AM - 3:00 PM",
     "location": "Community Hall", "category": "Holiday", "featured": True,
     "description": "Join us for our biggest celebration of the year with traditional performances, food, and festivities."},
    {"id": 2, "title": "Senior Health & Wellness Workshop", "date": "January 15, 2025", "time": "2:00 PM - 4:00 PM",
     "location": "Room 102", "category": "Health", "featured": False,
     "description": "Learn about maintaining health and wellness with expert speakers and interactive sessions."},
    {"id": 3, "title": "Traditional Chinese Painting Class", "date": "January 18, 2025", "time": "10:00 AM - 12:00 PM",
     "location": "Art Room", "category": "Arts", "featured": False,
     "description": "Explore the beautiful art of Chinese brush painting with our experienced instructors."},
    {"id": 4, "title": "Tai Chi in the Park", "date": "January 20, 2025", "time": "9:00 AM - 10:00 AM",
     "location": "Kanata Park", "category": "Fitness", "featured": False,
     "description": "Start your morning with gentle Tai Chi exercises in the fresh air."},
    {"id": 5, "title": "Chinese New Year Dumpling Making", "date": "January 22, 2025", "time": "1:00 PM - 4:00 PM",
     "location": "Kitchen", "category": "Cooking", "featured": True,
     "description": "Learn to make traditional dumplings for the New Year celebration."},
    {"id": 6, "title": "Technology Help Desk", "date": "January 24, 2025", "time": "10:00 AM - 12:00 PM",
     "location": "Computer Lab", "category": "Learning", "featured": False,
     "description": "Get one-on-one help with your smartphone, tablet, or computer questions."},
    {"id": 7, "title": "Movie Afternoon: Classic Films", "date": "January 28, 2025", "time": "2:00 PM - 4:30 PM",
     "location": "Community Hall", "category": "Social", "featured": False,
     "description": "Enjoy a classic Chinese film with friends and refreshments."},
    {"id": 8, "title": "Spring Festival Concert", "date": "February 1, 2025", "time": "7:00 PM - 9:00 PM",
     "location": "Community Hall", "category": "Holiday", "featured": True,
     "description": "A special evening of traditional music and performances celebrating the Spring Festival."},
    {"id": 9, "title": "Morning Exercise Group", "date": "January 16, 2025", "time": "8:00 AM - 9:00 AM",
     "location": "Community Hall", "category": "Fitness", "featured": False,
     "description": "Join our morning exercise group for a healthy start to your day."},
    {"id": 10, "title": "Chinese Calligraphy Workshop", "date": "January 17, 2025", "time": "2:00 PM - 4:00 PM",
     "location": "Art Room", "category": "Arts", "featured": False,
     "description": "Learn the art of Chinese calligraphy with master calligraphers."},
    {"id": 11, "title": "Community Lunch", "date": "January 19, 2025", "time": "12:00 PM - 2:00 PM",
     "location": "Dining Hall", "category": "Social", "featured": False,
     "description": "Enjoy a community lunch with friends and neighbors."},
    {"id": 12, "title": "Health Screening Day", "date": "January 21, 2025", "time": "10:00 AM - 3:00 PM",
     "location": "Room 101", "category": "Health", "featured": True,
     "description": "Free health screenings including blood pressure, glucose, and more."},
    {"id": 13, "title": "Mahjong Tournament", "date": "January 23, 2025", "time": "1:00 PM - 5:00 PM",
     "location": "Game Room", "category": "Social", "featured": False,
     "description": "Join our monthly Mahjong tournament. All skill levels welcome."},
    {"id": 14, "title": "Garden Club Meeting", "date": "January 26, 2025", "time": "2:00 PM - 4:00 PM",
     "location": "Room 103", "category": "Social", "featured": False,
     "description": "Monthly meeting of the community garden club. Share tips and seeds!"},
    {"id": 15, "title": "Chinese Language Class", "date": "January 27, 2025", "time": "10:00 AM - 11:30 AM",
     "location": "Classroom A", "category": "Learning", "featured": False,
     "description": "Beginner-friendly Chinese language class. Practice conversation and characters."},
    {"id": 16, "title": "Karaoke Night", "date": "January 29, 2025", "time": "6:00 PM - 9:00 PM",
     "location": "Community Hall", "category": "Social", "featured": False,
     "description": "Sing your favorite Chinese and English songs with friends!"},
    {"id": 17, "title": "Book Club Discussion", "date": "January 30, 2025", "time": "2:00 PM - 4:00 PM",
     "location": "Library", "category": "Learning", "featured": False,
     "description": "Monthly book club meeting. This month: Chinese literature classics."},
    {"id": 18, "title": "Yoga for Seniors", "date": "January 31, 2025", "time": "9:00 AM - 10:00 AM",
     "location": "Activity Room", "category": "Fitness", "featured": False,
     "description": "Gentle yoga class designed specifically for seniors."},
    {"id": 19, "title": "Cooking Class: Dim Sum", "date": "February 2, 2025", "time": "11:00 AM - 2:00 PM",
     "location": "Kitchen", "category": "Cooking", "featured": True,
     "description": "Learn to make traditional dim sum dishes from scratch."},
    {"id": 20, "title": "Computer Basics Workshop", "date": "February 3, 2025", "time": "10:00 AM - 12:00 PM",
     "location": "Computer Lab", "category": "Learning", "featured": False,
     "description": "Introduction to computers for beginners. Learn the basics step by step."},
]

PROGRAMS = [
    {"id": 1, "title": "Chinese Brush Painting", "category": "Arts & Crafts", "icon": "Palette",
     "schedule": "Tuesdays, 10:00 AM - 12:00 PM", "ageGroup": "All Ages", "spots": "12 spots available",
     "description": "Learn traditional Chinese brush painting techniques from experienced instructors. All skill levels welcome."},
    {"id": 2, "title": "Tai Chi for Beginners", "category": "Health & Wellness", "icon": "Heart",
     "schedule": "Mon/Wed/Fri, 9:00 AM - 10:00 AM", "ageGroup": "55+", "spots": "8 spots available",
     "description": "Gentle Tai Chi movements to improve balance, flexibility, and mental clarity."},
    {"id": 3, "title": "Chinese Folk Dance", "category": "Music & Dance", "icon": "Music",
     "schedule": "Thursdays, 2:00 PM - 4:00 PM", "ageGroup": "All Ages", "spots": "6 spots available",
     "description": "Learn beautiful traditional Chinese dances in a fun, supportive environment."},
    {"id": 4, "title": "Mandarin Conversation Circle", "category": "Language & Learning", "icon": "BookOpen",
     "schedule": "Wednesdays, 1:00 PM - 2:30 PM", "ageGroup": "All Ages", "spots": "10 spots available",
     "description": "Practice conversational Mandarin with fellow learners in a relaxed setting."},
    {"id": 5, "title": "Cooking: Regional Cuisines", "category": "Social & Dining", "icon": "Utensils",
     "schedule": "Saturdays, 11:00 AM - 1:00 PM", "ageGroup": "All Ages", "spots": "8 spots available",
     "description": "Explore dishes from different regions of China. Taste and learn together!"},
    {"id": 6, "title": "Gentle Exercise Class", "category": "Fitness Programs", "icon": "Dumbbell",
     "schedule": "Tuesdays/Thursdays, 11:00 AM - 12:00 PM", "ageGroup": "65+", "spots": "15 spots available",
     "description": "Low-impact exercises designed specifically for seniors to maintain mobility and strength."},
    {"id": 7, "title": "Chinese Calligraphy", "category": "Arts & Crafts", "icon": "Palette",
     "schedule": "Fridays, 10:00 AM - 12:00 PM", "ageGroup": "All Ages", "spots": "10 spots available",
     "description": "Master the art of Chinese calligraphy, from basic strokes to complete characters."},
    {"id": 8, "title": "Choir & Singing Group", "category": "Music & Dance", "icon": "Music",
     "schedule": "Wednesdays, 3:00 PM - 5:00 PM", "ageGroup": "All Ages", "spots": "Open enrollment",
     "description": "Join our community choir singing Chinese and international songs."},
    {"id": 9, "title": "Computer Skills Workshop", "category": "Language & Learning", "icon": "BookOpen",
     "schedule": "Mondays, 2:00 PM - 4:00 PM", "ageGroup": "55+", "spots": "6 spots available",
     "description": "Learn to use smartphones, tablets, and computers with patient, step-by-step guidance."},
]

PHOTOS = [
    {"id": 1, "photo": "/HeroPhoto.JPG", "description": "Community members gathering at the center for a special event",
     "event": "Lunar New Year Celebration", "date": "2025-01-25", "favourite": True},
    {"id": 2, "photo": "/StoneHouse.jpg", "description": "Beautiful community center building during spring",
     "event": "Spring Festival Concert", "date": "2025-02-01", "favourite": True},
    {"id": 3, "photo": "/HeroPhoto.JPG", "description": "Participants enjoying traditional activities",
     "event": "Chinese New Year Dumpling Making", "date": "2025-01-22", "favourite": True},
    {"id": 4, "photo": "/StoneHouse.jpg", "description": "Health professionals conducting wellness checks",
     "event": "Health Screening Day", "date": "2025-01-21", "favourite": True},
    {"id": 5, "photo": "/HeroPhoto.JPG", "description": "Artists showcasing their calligraphy work",
     "event": "Chinese Calligraphy Workshop", "date": "2025-01-17", "favourite": False},
    {"id": 6, "photo": "/StoneHouse.jpg", "description": "Members practicing Tai Chi in the morning",
     "event": "Tai Chi in the Park", "date": "2025-01-20", "favourite": False},
    {"id": 7, "photo": "/HeroPhoto.JPG", "description": "Traditional Chinese painting class in session",
     "event": "Traditional Chinese Painting Class", "date": "2025-01-18", "favourite": False},
    {"id": 8, "photo": "/StoneHouse.jpg", "description": "Community lunch gathering with friends",
     "event": "Community Lunch", "date": "2025-01-19", "favourite": False},
    {"id": 9, "photo": "/HeroPhoto.JPG", "description": "Expert speaker presenting health information",
     "event": "Senior Health & Wellness Workshop", "date": "2025-01-15", "favourite": False},
    {"id": 10, "photo": "/StoneHouse.jpg", "description": "Morning exercise group in action",
     "event": "Morning Exercise Group", "date": "2025-01-16", "favourite": False},
    {"id": 11, "photo": "/HeroPhoto.JPG", "description": "Technology help session for seniors",
     "event": "Technology Help Desk", "date": "2025-01-24", "favourite": False},
    {"id": 12, "photo": "/StoneHouse.jpg", "description": "Classic film screening event",
     "event": "Movie Afternoon: Classic Films", "date": "2025-01-28", "favourite": False},
    {"id": 13, "photo": "/HeroPhoto.JPG", "description": "Mahjong tournament participants",
     "event": "Mahjong Tournament", "date": "2025-01-23", "favourite": False},
    {"id": 14, "photo": "/StoneHouse.jpg", "description": "Garden club members sharing tips",
     "event": "Garden Club Meeting", "date": "2025-01-26", "favourite": False},
    {"id": 15, "photo": "/HeroPhoto.JPG", "description": "Language class students practicing",
     "event": "Chinese Language Class", "date": "2025-01-27", "favourite": False},
    {"id": 16, "photo": "/StoneHouse.jpg", "description": "Karaoke night celebration",
     "event": "Karaoke Night", "date": "2025-01-29", "favourite": False},
    {"id": 17, "photo": "/HeroPhoto.JPG", "description": "Book club discussion session",
     "event": "Book Club Discussion", "date": "2025-01-30", "favourite": False},
    {"id": 18, "photo": "/StoneHouse.jpg", "description": "Yoga class for seniors",
     "event": "Yoga for Seniors", "date": "2025-01-31", "favourite": False},
    {"id": 19, "photo": "/HeroPhoto.JPG", "description": "Dim sum cooking class demonstration",
     "event": "Cooking Class: Dim Sum", "date": "2025-02-02", "favourite": False},
    {"id": 20, "photo": "/StoneHouse.jpg", "description": "Computer basics workshop participants",
     "event": "Computer Basics Workshop", "date": "2025-02-03", "favourite": False},
]


def mock_events() -> List[EventResponse]:
    return [EventResponse.model_validate(e) for e in EVENTS]


def mock_programs() -> List[ProgramResponse]:
    return [
        ProgramResponse.model_validate({**p, **recurrence_fields(Recurrence.parse(p["schedule"]))})
        for p in PROGRAMS
    ]


def mock_photos() -> List[PhotoResponse]:
    return [PhotoResponse.model_validate(p) for p in PHOTOS]
