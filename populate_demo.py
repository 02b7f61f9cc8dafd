# Di dalam file: populate_demo.py

import requests

# URL dasar API kita (server Uvicorn lokal)
API_URL = "http://127.0.0.1:8000"

# Contoh keluarga untuk demo form
demo_family = [
    {"name": "Ravi", "relation": "son", "gender": "male"},
    {"name": "Meera", "relation": "daughter", "gender": "female"},
    {"name": "Lakshmi", "relation": "widow", "gender": "female"},
    {"name": "Savitri", "relation": "mother", "gender": "female"},
    {"name": "Mohan", "relation": "brother", "gender": "male", "is_alive": False},
]
demo_property_value = "2500000"

def populate_demo(session=None, api_url=API_URL):
    """
    Buat satu roster demo lewat API, isi anggota keluarga, lalu jalankan kalkulasi.
    Return state roster terakhir (dict) atau None bila server tidak bisa dihubungi.
    """
    session = session or requests.Session()
    print("Membuat roster demo...")
    try:
        response = session.post(f"{api_url}/rosters/")
        response.raise_for_status()
        roster_id = response.json()["id"]

        for person in demo_family:
            members = session.post(f"{api_url}/rosters/{roster_id}/members/").json()
            member_id = members[-1]["id"]
            for field, value in person.items():
                session.patch(
                    f"{api_url}/rosters/{roster_id}/members/{member_id}",
                    json={"field": field, "value": value},
                ).raise_for_status()
            print(f"  [BERHASIL] Menambahkan: {person['name']} ({person['relation']})")

        session.put(
            f"{api_url}/rosters/{roster_id}/property-value",
            json={"property_value": demo_property_value},
        ).raise_for_status()
        state = session.post(f"{api_url}/rosters/{roster_id}/calculate").json()

    except requests.exceptions.ConnectionError as e:
        print("\n[ERROR] Koneksi ke server gagal. Pastikan server Uvicorn Anda sedang berjalan.")
        print(f"Detail: {e}")
        return None

    for result in state["results"]:
        print(f"  {result['label']:<10} {result['share_display']:>14}  {result['percentage_display']}%")
    print(f"\nRoster {roster_id} selesai. Total: {state['summary']['total_property_display']}")
    return state

if __name__ == "__main__":
    populate_demo()
