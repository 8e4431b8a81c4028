"""
Demo dataset loaded into the stores at startup.

Dates are relative to the day the data is loaded so that the
vaccination and training summaries stay meaningful whenever the
service is started.  Adoption, health and training records reference
the seeded dogs by the ids the dog store assigns.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import TYPE_CHECKING, Optional

from ..utils.datetime_utils import shift_years, today

if TYPE_CHECKING:
    from .store import DataStores

logger = logging.getLogger(__name__)


DOGS = [
    {
        "name": "Buddy",
        "breed": "Golden Retriever",
        "age": 3,
        "weight": 65,
        "gender": "male",
        "color": "Golden",
        "size": "large",
        "temperament": ["friendly", "energetic", "loyal"],
        "is_neutered": True,
        "microchip_id": "123456789012345",
        "photos": [
            "https://example.com/photos/buddy1.jpg",
            "https://example.com/photos/buddy2.jpg",
        ],
        "description": (
            "Buddy is a lovable Golden Retriever who loves playing fetch and swimming. "
            "He's great with kids and other dogs."
        ),
    },
    {
        "name": "Luna",
        "breed": "Border Collie",
        "age": 2,
        "weight": 45,
        "gender": "female",
        "color": "Black and White",
        "size": "medium",
        "temperament": ["intelligent", "active", "responsive"],
        "is_neutered": True,
        "microchip_id": "987654321098765",
        "photos": ["https://example.com/photos/luna1.jpg"],
        "description": (
            "Luna is a brilliant Border Collie who excels at agility training. "
            "She needs an active family who can keep up with her energy."
        ),
    },
    {
        "name": "Max",
        "breed": "German Shepherd",
        "age": 5,
        "weight": 75,
        "gender": "male",
        "color": "Brown and Black",
        "size": "large",
        "temperament": ["protective", "confident", "courageous"],
        "is_neutered": True,
        "photos": [
            "https://example.com/photos/max1.jpg",
            "https://example.com/photos/max2.jpg",
            "https://example.com/photos/max3.jpg",
        ],
        "description": (
            "Max is a noble German Shepherd with excellent training. "
            "He would make a great guard dog and family companion."
        ),
    },
    {
        "name": "Bella",
        "breed": "French Bulldog",
        "age": 1,
        "weight": 22,
        "gender": "female",
        "color": "Cream",
        "size": "small",
        "temperament": ["adaptable", "playful", "alert"],
        "is_neutered": False,
        "photos": ["https://example.com/photos/bella1.jpg"],
        "description": (
            "Bella is a charming French Bulldog puppy who loves attention and cuddles. "
            "Perfect for apartment living."
        ),
    },
    {
        "name": "Rocky",
        "breed": "Pitbull Terrier",
        "age": 4,
        "weight": 55,
        "gender": "male",
        "color": "Brindle",
        "size": "medium",
        "temperament": ["loyal", "affectionate", "strong"],
        "is_neutered": True,
        "microchip_id": "456789123456789",
        "photos": [
            "https://example.com/photos/rocky1.jpg",
            "https://example.com/photos/rocky2.jpg",
        ],
        "description": (
            "Rocky is a gentle giant who loves children and playing tug-of-war. "
            "He's looking for a loving forever home."
        ),
    },
]

BREEDS = [
    {
        "name": "Golden Retriever",
        "group": "sporting",
        "origin": "Scotland",
        "size": "large",
        "life_span": {"min": 10, "max": 12},
        "temperament": ["friendly", "intelligent", "devoted", "trustworthy"],
        "exercise_needs": "high",
        "grooming_needs": "moderate",
        "trainability": "high",
        "good_with_kids": True,
        "good_with_pets": True,
        "description": (
            "Golden Retrievers are friendly, intelligent dogs that are devoted to their families. "
            "They were originally bred to retrieve waterfowl for hunters."
        ),
        "image": "https://example.com/breeds/golden-retriever.jpg",
    },
    {
        "name": "Border Collie",
        "group": "herding",
        "origin": "United Kingdom",
        "size": "medium",
        "life_span": {"min": 12, "max": 15},
        "temperament": ["intelligent", "energetic", "responsive", "alert"],
        "exercise_needs": "very-high",
        "grooming_needs": "moderate",
        "trainability": "very-high",
        "good_with_kids": True,
        "good_with_pets": True,
        "description": (
            "Border Collies are extremely intelligent and energetic dogs that excel at herding "
            "and agility sports."
        ),
        "image": "https://example.com/breeds/border-collie.jpg",
    },
    {
        "name": "German Shepherd",
        "group": "herding",
        "origin": "Germany",
        "size": "large",
        "life_span": {"min": 9, "max": 13},
        "temperament": ["confident", "courageous", "smart", "versatile"],
        "exercise_needs": "high",
        "grooming_needs": "moderate",
        "trainability": "very-high",
        "good_with_kids": True,
        "good_with_pets": False,
        "description": (
            "German Shepherds are large, athletic dogs known for their loyalty, courage, "
            "and versatility as working dogs."
        ),
        "image": "https://example.com/breeds/german-shepherd.jpg",
    },
    {
        "name": "French Bulldog",
        "group": "non-sporting",
        "origin": "France",
        "size": "small",
        "life_span": {"min": 10, "max": 12},
        "temperament": ["adaptable", "playful", "smart", "alert"],
        "exercise_needs": "low",
        "grooming_needs": "low",
        "trainability": "moderate",
        "good_with_kids": True,
        "good_with_pets": True,
        "description": (
            "French Bulldogs are small, muscular dogs with a calm nature and require minimal "
            "exercise, making them excellent city dogs."
        ),
        "image": "https://example.com/breeds/french-bulldog.jpg",
    },
]


def load_seed_data(stores: "DataStores", on: Optional[date] = None) -> None:
    """Append the demo records to ``stores``.

    ``on`` is the reference day for relative dates (defaults to today).
    """
    base = on or today()

    def days_ago(days: int) -> date:
        return base - timedelta(days=days)

    dogs = [stores.dogs.append(data) for data in DOGS]
    buddy, luna, max_, _bella, _rocky = dogs

    for data in BREEDS:
        stores.breeds.append(data)

    stores.adoptions.append({
        "dog_id": buddy.id,
        "applicant_name": "John Smith",
        "applicant_email": "john.smith@email.com",
        "applicant_phone": "+1-555-0123",
        "address": {"street": "123 Main St", "city": "Springfield", "state": "IL", "zip_code": "62701"},
        "housing_type": "house",
        "has_yard": True,
        "has_other_pets": False,
        "experience": "experienced",
        "work_schedule": "9-5 weekdays, home evenings and weekends",
        "reason": (
            "Looking for a loyal family companion for our children. We have experience with "
            "Golden Retrievers and love their temperament."
        ),
        "status": "pending",
        "notes": "Strong application, good references",
    })
    stores.adoptions.append({
        "dog_id": luna.id,
        "applicant_name": "Sarah Johnson",
        "applicant_email": "sarah.j@email.com",
        "applicant_phone": "+1-555-0456",
        "address": {"street": "456 Oak Ave", "city": "Denver", "state": "CO", "zip_code": "80202"},
        "housing_type": "house",
        "has_yard": True,
        "has_other_pets": True,
        "other_pets_details": "One cat named Whiskers, very dog-friendly",
        "experience": "very-experienced",
        "work_schedule": "Work from home, very flexible schedule",
        "reason": (
            "I'm an agility trainer and Luna would be perfect for my training programs. "
            "I have experience with Border Collies."
        ),
        "status": "approved",
        "notes": "Perfect match - applicant is professional dog trainer",
    })

    stores.health.append({
        "dog_id": buddy.id,
        "type": "vaccination",
        "date": days_ago(20),
        "veterinarian": "Dr. Emily Chen",
        "clinic": "Happy Paws Veterinary Clinic",
        "description": "Annual vaccination including rabies, DHPP, and bordetella",
        "medications": [
            {"name": "Rabies Vaccine", "dosage": "1ml", "frequency": "Annual"},
            {"name": "DHPP Vaccine", "dosage": "1ml", "frequency": "Annual"},
        ],
        "cost": 150,
        "follow_up_date": shift_years(base, 1),
        "notes": "Dog tolerated vaccines well, no adverse reactions",
    })
    stores.health.append({
        "dog_id": buddy.id,
        "type": "checkup",
        "date": days_ago(60),
        "veterinarian": "Dr. Michael Rodriguez",
        "clinic": "Happy Paws Veterinary Clinic",
        "description": "Routine wellness examination and health screening",
        "cost": 85,
        "notes": "Overall excellent health, slight tartar buildup on teeth",
    })
    stores.health.append({
        "dog_id": luna.id,
        "type": "treatment",
        "date": days_ago(30),
        "veterinarian": "Dr. Lisa Park",
        "clinic": "Mountain View Animal Hospital",
        "description": "Treatment for minor ear infection",
        "medications": [
            {"name": "Antibiotic Ear Drops", "dosage": "3 drops", "frequency": "Twice daily for 10 days"},
        ],
        "cost": 65,
        "notes": "Infection cleared up well, no follow-up needed",
    })

    stores.training.append({
        "dog_id": buddy.id,
        "type": "basic-obedience",
        "trainer": "Mark Thompson",
        "facility": "Happy Tails Training Center",
        "start_date": days_ago(100),
        "end_date": days_ago(50),
        "status": "completed",
        "skills": ["sit", "stay", "down", "come", "heel", "leave it"],
        "progress": "excellent",
        "cost": 300,
        "notes": "Buddy was an exceptional student, learned all commands quickly",
        "certificates": ["https://example.com/certificates/buddy-basic-obedience.pdf"],
    })
    stores.training.append({
        "dog_id": luna.id,
        "type": "agility",
        "trainer": "Sarah Johnson",
        "facility": "Mountain Agility Club",
        "start_date": days_ago(60),
        "status": "in-progress",
        "skills": ["tunnel", "weave poles", "A-frame", "jump", "pause table"],
        "progress": "excellent",
        "cost": 450,
        "notes": "Luna is a natural at agility, very fast learner",
    })
    stores.training.append({
        "dog_id": max_.id,
        "type": "advanced-obedience",
        "trainer": "Robert Miller",
        "facility": "Elite K9 Academy",
        "start_date": days_ago(180),
        "end_date": days_ago(150),
        "status": "completed",
        "skills": ["heel off-leash", "distance commands", "emergency recall", "advanced stay", "protection work"],
        "progress": "excellent",
        "cost": 800,
        "notes": "Max completed advanced protection training with honors",
        "certificates": ["https://example.com/certificates/max-advanced-obedience.pdf"],
    })

    logger.info(
        "Loaded seed data: %d dogs, %d breeds, %d applications, %d health records, %d training records",
        len(stores.dogs),
        len(stores.breeds),
        len(stores.adoptions),
        len(stores.health),
        len(stores.training),
    )
