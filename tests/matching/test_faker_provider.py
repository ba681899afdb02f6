import pytest

from ridehail.matching.faker_provider import RideVehicleProvider, create_faker_instance
from ridehail.models import RideClass


@pytest.mark.unit
class TestRideFakerProviders:
    def test_vehicle_vocabulary_per_class(self, fake):
        for ride_class in RideClass:
            for _ in range(20):
                assert fake.vehicle_for_class(ride_class) in RideVehicleProvider.VEHICLES[ride_class]

    def test_vocabularies_do_not_overlap(self):
        vocabularies = [set(v) for v in RideVehicleProvider.VEHICLES.values()]
        assert not (vocabularies[0] & vocabularies[1] or vocabularies[1] & vocabularies[2])
        assert not vocabularies[0] & vocabularies[2]

    def test_driver_name_has_first_and_last(self, fake):
        assert len(fake.driver_name().split()) >= 2

    def test_seeded_instances_agree(self):
        first = create_faker_instance(seed=7)
        second = create_faker_instance(seed=7)
        assert [first.driver_name() for _ in range(5)] == [second.driver_name() for _ in range(5)]
