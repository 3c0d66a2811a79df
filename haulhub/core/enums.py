from enum import Enum


class VehicleType(str, Enum):
    BIKE = "bike"
    BICYCLE = "bicycle"
    EBIKE = "ebike"
    ESCOOTER = "escooter"
    MOTORCYCLE = "motorcycle"
    CAR = "car"
    VAN = "van"
    TRUCK = "truck"

    def __str__(self):
        return self.value


ECO_VEHICLES = frozenset({
    VehicleType.BIKE.value,
    VehicleType.BICYCLE.value,
    VehicleType.EBIKE.value,
    VehicleType.ESCOOTER.value,
})


class JobStatus(str, Enum):
    CREATED = "created"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    def __str__(self):
        return self.value
