from pydantic import BaseModel, Field, field_validator
from typing import Literal

DESTINATIONS = (
    "Dal Lake, Srinagar",
    "Gulmarg",
    "Pahalgam",
    "Sonamarg",
    "Yusmarg",
    "Doodhpathri",
    "Custom Package",
)
ROOM_TYPES = ("standard", "deluxe", "suite", "houseboat")
MEAL_PREFERENCES = ("vegetarian", "nonVegetarian", "vegan", "halal")

RoomType = Literal["standard", "deluxe", "suite", "houseboat"]
MealPreference = Literal["vegetarian", "nonVegetarian", "vegan", "halal"]


class EmergencyContact(BaseModel):
    name: str = ""
    phone: str = ""
    relation: str = ""


class RegistrationCreate(BaseModel):
    """Booking form payload. Defaults are the empty form shape."""

    firstName: str = ""
    lastName: str = ""
    email: str = ""  # plain str; format is checked by the form validators
    phone: str = ""
    destination: str = ""
    departureDate: str = ""  # DD/MM/YYYY
    returnDate: str = ""
    adults: str = "1"
    children: str = "0"
    roomType: RoomType = "standard"
    mealPreference: MealPreference = "vegetarian"
    specialRequests: str = ""
    emergencyContact: EmergencyContact = Field(default_factory=EmergencyContact)
    streetAddress: str = ""
    city: str = ""
    stateProvince: str = ""
    postalCode: str = ""
    country: str = ""
    termsAccepted: bool = False

    @field_validator("adults", "children", mode="before")
    @classmethod
    def count_as_str(cls, v):
        # number inputs may arrive as JSON numbers
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


# The client-held draft has exactly the wire shape.
BookingDraft = RegistrationCreate
