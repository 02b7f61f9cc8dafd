"""
Test Suite untuk Modul Perhitungan Pembagian Harta (Share Calculator)
Mencakup: guard input, golongan & bobot, konservasi, widow ganda, parsing nilai harta
"""

import pytest
from calculator import calculate_inheritance, parse_property_value
from schemas import FamilyMember


# ========== FUNGSI PEMBANTU ==========
def member(id, relation=None, is_alive=True, name=""):
    return FamilyMember(id=id, name=name, relation=relation, gender=None, is_alive=is_alive)


def run_test(members, property_value=1000, expected_shares=None, expected_percentages=None):
    """Fungsi pembantu untuk menjalankan kalkulasi dan memeriksa hasil per member id."""
    results = calculate_inheritance(property_value, members)
    assert results is not None, "Kalkulasi seharusnya berjalan"

    by_id = {r.member.id: r for r in results}
    if expected_shares:
        for member_id, share in expected_shares.items():
            assert member_id in by_id, f"Anggota {member_id} tidak ditemukan"
            assert by_id[member_id].share == pytest.approx(share), \
                f"Share {member_id} salah. Harusnya {share}, hasilnya {by_id[member_id].share}"
    if expected_percentages:
        for member_id, pct in expected_percentages.items():
            assert by_id[member_id].percentage == pytest.approx(pct, abs=0.01), \
                f"Persentase {member_id} salah. Harusnya {pct}, hasilnya {by_id[member_id].percentage}"
    return results


# ========== TES KASUS DASAR ==========
class TestKasusDasar:
    """Contoh pembagian yang angkanya sudah pasti."""

    def test_dua_son_satu_daughter(self):
        run_test(
            [member(1, "son"), member(2, "son"), member(3, "daughter")],
            property_value=900000,
            expected_shares={1: 300000, 2: 300000, 3: 300000},
            expected_percentages={1: 33.33, 2: 33.33, 3: 33.33},
        )

    def test_son_widow_mother(self):
        run_test(
            [member(1, "son"), member(2, "widow"), member(3, "mother")],
            property_value=1000000,
            expected_shares={1: 400000, 2: 400000, 3: 200000},
            expected_percentages={1: 40, 2: 40, 3: 20},
        )

    def test_satu_anggota_dapat_semua(self):
        run_test(
            [member(1, "father")],
            property_value=500,
            expected_shares={1: 500},
            expected_percentages={1: 100},
        )

    def test_relation_kosong_dan_tidak_dikenal_dihitung_other(self):
        run_test(
            [member(1, "son"), member(2, None), member(3, "cousin"), member(4, "")],
            property_value=2500,
            expected_shares={1: 1000, 2: 500, 3: 500, 4: 500},
        )

    def test_semua_kerabat_lain_dibagi_rata(self):
        run_test(
            [member(1, "mother"), member(2, "father"), member(3, "brother"), member(4, "sister")],
            property_value=1000,
            expected_shares={1: 250, 2: 250, 3: 250, 4: 250},
        )


# ========== TES KONSERVASI ==========
class TestKonservasi:
    """Jumlah share = total harta, jumlah persentase = 100."""

    @pytest.mark.parametrize("property_value", [1, 999.99, 1000000, 123456789])
    def test_total_terjaga(self, property_value):
        members = [
            member(1, "son"), member(2, "daughter"), member(3, "widow"),
            member(4, "mother"), member(5, "brother"), member(6, "sister", is_alive=False),
        ]
        results = calculate_inheritance(property_value, members)
        assert sum(r.share for r in results) == pytest.approx(property_value)
        assert sum(r.percentage for r in results) == pytest.approx(100)

    def test_nilai_negatif_tidak_ditolak(self):
        results = run_test(
            [member(1, "son"), member(2, "mother")],
            property_value="-300",
            expected_shares={1: -200, 2: -100},
        )
        assert sum(r.share for r in results) == pytest.approx(-300)


# ========== TES ANGGOTA MENINGGAL ==========
class TestAnggotaMeninggal:

    def test_anggota_meninggal_tidak_muncul(self):
        results = run_test(
            [member(1, "son"), member(2, "widow", is_alive=False), member(3, "daughter")],
            property_value=1000,
            expected_shares={1: 500, 3: 500},
        )
        assert [r.member.id for r in results] == [1, 3]

    def test_semua_meninggal_hasil_kosong(self):
        # Roster tidak kosong, jadi kalkulasi tetap jalan; total bobot 0 -> tidak ada hasil
        results = calculate_inheritance(1000, [member(1, "son", is_alive=False)])
        assert results == []

    def test_urutan_mengikuti_roster(self):
        results = calculate_inheritance(
            1000, [member(5, "mother"), member(2, "son"), member(9, "daughter", is_alive=False), member(3, "widow")]
        )
        assert [r.member.id for r in results] == [5, 2, 3]


# ========== TES WIDOW GANDA ==========
class TestWidowGanda:
    """Hanya widow pertama yang mendapat bobot; widow berikutnya bobot 0."""

    def test_hanya_widow_pertama_dapat_bagian(self):
        results = run_test(
            [member(1, "widow"), member(2, "son"), member(3, "widow")],
            property_value=1000,
            expected_shares={1: 500, 2: 500, 3: 0},
            expected_percentages={1: 50, 2: 50, 3: 0},
        )
        # Widow tambahan tetap tampil di hasil
        assert [r.member.id for r in results] == [1, 2, 3]

    def test_widow_pertama_yang_hidup(self):
        run_test(
            [member(1, "widow", is_alive=False), member(2, "widow"), member(3, "widow")],
            property_value=1000,
            expected_shares={2: 1000, 3: 0},
        )

    def test_widow_tambahan_tidak_dihitung_sebagai_other(self):
        run_test(
            [member(1, "widow"), member(2, "widow"), member(3, "mother")],
            property_value=1500,
            expected_shares={1: 1000, 2: 0, 3: 500},
        )


# ========== TES GUARD INPUT ==========
class TestGuardInput:
    """Input tidak valid -> None (hasil sebelumnya tidak diubah), tidak pernah raise."""

    @pytest.mark.parametrize("property_value", [None, "", "abc", "   ", ".", "-", "Infinity", "1e999"])
    def test_nilai_harta_tidak_valid(self, property_value):
        assert calculate_inheritance(property_value, [member(1, "son")]) is None

    def test_roster_kosong(self):
        assert calculate_inheritance("1000", []) is None

    def test_roster_kosong_dan_nilai_kosong(self):
        assert calculate_inheritance("", []) is None

    def test_nol_tetap_dihitung(self):
        results = run_test([member(1, "son")], property_value="0", expected_shares={1: 0})
        assert results[0].percentage == pytest.approx(100)


# ========== TES PARSING NILAI HARTA ==========
class TestParsing:

    @pytest.mark.parametrize("raw, expected", [
        ("1000", 1000.0),
        ("  2500.50", 2500.5),
        ("1500abc", 1500.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("-42", -42.0),
        (750, 750.0),
        (12.25, 12.25),
    ])
    def test_parse_valid(self, raw, expected):
        assert parse_property_value(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", [None, "", "abc", "NaN", True, float("nan"), float("inf")])
    def test_parse_tidak_valid(self, raw):
        assert parse_property_value(raw) is None


# ========== TES ID GANDA ==========
class TestIdGanda:
    """Bobot dihitung per anggota, bukan per id; total tetap terjaga."""

    def test_dua_son_id_sama(self):
        results = calculate_inheritance(1000, [member(1, "son"), member(1, "son")])
        assert [r.share for r in results] == pytest.approx([500, 500])
        assert sum(r.share for r in results) == pytest.approx(1000)

    def test_golongan_berbeda_id_sama(self):
        results = calculate_inheritance(1500, [member(7, "son"), member(7, "mother")])
        assert [r.share for r in results] == pytest.approx([1000, 500])
        assert sum(r.percentage for r in results) == pytest.approx(100)

    def test_widow_id_sama_hanya_pertama(self):
        results = calculate_inheritance(1000, [member(3, "widow"), member(3, "widow"), member(4, "son")])
        assert [r.share for r in results] == pytest.approx([500, 0, 500])
