"""
Verified pharmacies available without registration (the seed set).

Real Bangalore pharmacies checked against Google Maps; coordinates are
precise enough for directions links. This list is read-only at runtime:
registrations go to the `pharmacies` table instead.
"""
from typing import Tuple

from medfinder.schemas.pharmacy import PharmacyBase


def _seed(id, name, address, phone, lat, lon) -> PharmacyBase:
    return PharmacyBase(id=id, name=name, address=address, phone=phone, lat=lat, lon=lon)


SEED_PHARMACIES: Tuple[PharmacyBase, ...] = (
    # Kengeri
    _seed(21, "Apollo Pharmacy", "Mysore Road, Kengeri Satellite Town", "080-2848-1122", 12.9189, 77.4856),
    _seed(22, "Medplus Pharmacy", "Kengeri Main Rd, Opposite Kengeri Bus Terminal", "080-2848-3344", 12.9155, 77.4808),
    _seed(30, "Sri Maruthi Pharma", "1st Main Road, Kengeri Upanagara", "080-2848-5566", 12.9213, 77.4842),
    _seed(31, "HealthFirst Pharmacy", "Kommaghatta Main Rd, Kengeri Hobli", "080-2848-7788", 12.9252, 77.4759),

    # Uttarahalli
    _seed(23, "Apollo Pharmacy", "Uttarahalli Main Rd, Chikkalasandra", "080-2673-5050", 12.9077, 77.5451),
    _seed(24, "Sri Sai Medical & General Stores", "Subramanyapura Main Road", "080-2639-1212", 12.9015, 77.5490),
    _seed(32, "MedPlus Pharmacy", "Dr Vishnuvardhan Rd, AGS Layout", "080-2639-4455", 12.9058, 77.5401),
    _seed(33, "Jan Aushadhi Kendra", "Padmanabhanagar, Near Uttarahalli", "080-2639-8899", 12.9125, 77.5523),

    # RR Nagar (Rajarajeshwari Nagar)
    _seed(25, "Apollo Pharmacy", "Near RR Nagar Arch, Mysore Road", "080-2860-9090", 12.9265, 77.5188),
    _seed(26, "Medplus Pharmacy", "8th Cross, BEML Layout, RR Nagar", "080-2860-7070", 12.9303, 77.5102),
    _seed(27, "Dava Discount", "Ideal Homes Township, RR Nagar", "080-2861-1234", 12.9331, 77.5145),
    _seed(34, "Apollo Pharmacy - BEML Layout", "9th Main Rd, BEML Layout, RR Nagar", "080-2860-3030", 12.9298, 77.5113),

    # Banashankari
    _seed(18, "Apollo Pharmacy", "24th Main Rd, Banashankari 2nd Stage", "080-2671-5555", 12.9251, 77.5469),
    _seed(28, "Wellness Forever", "Outer Ring Rd, Banashankari 3rd Stage", "080-2679-8899", 12.9157, 77.5571),
    _seed(29, "MedPlus Pharmacy", "Kathriguppe Main Rd, Banashankari 3rd Stage", "080-2672-2200", 12.9105, 77.5603),
    _seed(36, "Sri Guru Medicals", "Near BDA Complex, BSK 2nd Stage", "080-2671-8888", 12.9285, 77.5504),
    _seed(37, "Vivek Pharma", "Kadirenahalli Cross, Banashankari", "080-2671-9999", 12.9193, 77.5620),

    # Other areas
    _seed(1, "Apollo Pharmacy - Jayanagar", "Jayanagar 9th Block, Bangalore", "080-2663-0919", 12.9248, 77.5843),
    _seed(2, "Wellness Forever - Koramangala", "Koramangala 4th Block, Bangalore", "080-4110-2222", 12.9345, 77.6264),
    _seed(3, "MedPlus Pharmacy - Indiranagar", "Indiranagar, 100 Feet Rd, Bangalore", "080-4092-7575", 12.9784, 77.6408),
)

SEED_IDS = frozenset(p.id for p in SEED_PHARMACIES)
