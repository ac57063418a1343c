import pytest

from fotones.bsdf import BSDF, MATERIALS


def test_material_table_fixed_by_source():
    diffuse = BSDF.from_material((1.0, 1.0, 1.0), "difuso")
    mirror = BSDF.from_material((1.0, 1.0, 1.0), "espejo")
    glass = BSDF.from_material((1.0, 1.0, 1.0), "cristal")
    assert diffuse.raw_coefficients == (0.55, 0.0, 0.0)
    assert diffuse.kd == (0.55, 0.55, 0.55)
    assert mirror.raw_coefficients == (0.0, 0.9, 0.0)
    assert mirror.ks == (0.9, 0.9, 0.9)
    assert glass.raw_coefficients == (0.0, 0.1, 0.8)
    assert glass.kt == (0.8, 0.8, 0.8)


def test_default_is_white_diffuse():
    default = BSDF()
    white = BSDF.from_material((1.0, 1.0, 1.0), "difuso")
    assert default == white
    assert default.raw_coefficients == MATERIALS["difuso"]


@pytest.mark.parametrize("material", sorted(MATERIALS))
def test_white_material_coefficients_match_table(material):
    bsdf = BSDF.from_material((1.0, 1.0, 1.0), material)
    kd, ks, kt = MATERIALS[material]
    assert bsdf.kd == (kd, kd, kd)
    assert bsdf.ks == (ks, ks, ks)
    assert bsdf.kt == (kt, kt, kt)
    assert bsdf.raw_coefficients == MATERIALS[material]


def test_black_colour_cancels_every_coefficient():
    bsdf = BSDF.from_material((0.0, 0.0, 0.0), "plastico")
    assert bsdf.kd == (0.0, 0.0, 0.0)
    assert bsdf.ks == (0.0, 0.0, 0.0)
    assert bsdf.kt == (0.0, 0.0, 0.0)


def test_colour_channel_zero_stays_zero():
    bsdf = BSDF.from_material((1.0, 0.0, 1.0), "muy_difuso")
    assert bsdf.kd[1] == 0.0
    assert bsdf.kd[0] == bsdf.kd[2] == MATERIALS["muy_difuso"][0]


def test_unknown_material_has_no_coefficients():
    bsdf = BSDF.from_material((1.0, 1.0, 1.0), "unobtainium")
    assert bsdf.kd == bsdf.ks == bsdf.kt == (0.0, 0.0, 0.0)


def test_from_coefficients_with_white_keeps_values():
    bsdf = BSDF.from_coefficients((1.0, 1.0, 1.0), (0.1, 0.2, 0.3), (0.4, 0.5, 0.6), (0.7, 0.8, 0.9))
    assert bsdf.kd == (0.1, 0.2, 0.3)
    assert bsdf.ks == (0.4, 0.5, 0.6)
    assert bsdf.kt == (0.7, 0.8, 0.9)
    assert bsdf.raw_coefficients is None


def test_from_coefficients_component_wise():
    bsdf = BSDF.from_coefficients((0.0, 1.0, 0.0), (0.5, 0.5, 0.5), (1.0, 1.0, 1.0), (0.0, 0.0, 0.0))
    assert bsdf.kd == (0.0, 0.5, 0.0)
    assert bsdf.ks == (0.0, 1.0, 0.0)


def test_wrong_colour_length_raises():
    with pytest.raises(ValueError):
        BSDF.from_material((1.0, 1.0), "difuso")
    with pytest.raises(ValueError):
        BSDF.from_coefficients((1.0, 1.0, 1.0), (1.0,), (1.0, 1.0, 1.0), (1.0, 1.0, 1.0))


def test_str_layout():
    text = str(BSDF.from_coefficients((1.0, 1.0, 1.0), (1, 0, 0), (0, 1, 0), (0, 0, 1)))
    lines = text.splitlines()
    assert lines[0] == "[ kd= (1, 0, 0)"
    assert lines[1] == "  ks= (0, 1, 0)"
    assert lines[2] == "  kt= (0, 0, 1) ]"