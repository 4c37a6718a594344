from ethcal.daynum import ethiopian_to_fixed, monday_weekday
from ethcal.models import Evangelist
from ethcal.year_meta import amete_alem, evangelist, metene_rabiet, new_year_weekday, year_meta


def test_amete_alem_and_metene_rabiet():
    assert amete_alem(2016) == 7516
    assert metene_rabiet(7516) == 1879


def test_evangelist_cycle():
    order = [Evangelist.MATTHEW, Evangelist.MARK, Evangelist.LUKE, Evangelist.JOHN]
    # 2017 is a year of Matthew
    for i in range(40):
        assert evangelist(amete_alem(2017 + i)) is order[i % 4]


def test_evangelist_traditional_names():
    assert evangelist(amete_alem(2016)).traditional_name == "Yohannes"
    assert Evangelist.MATTHEW.traditional_name == "Mathewos"


def test_new_year_weekday_known_years():
    # 2023-09-12 was a Tuesday, 2022-09-11 a Sunday
    assert new_year_weekday(2016) == 1
    assert new_year_weekday(2015) == 6
    assert new_year_weekday(2016) == new_year_weekday(2016)


def test_new_year_weekday_matches_day_numbers():
    for y in range(1900, 2101):
        assert new_year_weekday(y) == monday_weekday(ethiopian_to_fixed(y, 1, 1))


def test_year_meta_bundle():
    meta = year_meta(2016)
    assert meta.year == 2016
    assert meta.amete_alem == 7516
    assert meta.metene_rabiet == 1879
    assert meta.evangelist is Evangelist.JOHN
    assert meta.new_year_weekday == 1
