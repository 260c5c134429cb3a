from services.medicine import MedicineService, load_catalog
from schemas import Medicine


def test_search_matches_name_generic_name_and_category(client):
    by_name = client.get("/medicines/search", params={"q": "para"}).json()
    by_generic = client.get("/medicines/search", params={"q": "acetaminophen"}).json()
    by_category = client.get("/medicines/search", params={"q": "dermatology"}).json()

    assert [m["name"] for m in by_name] == ["Paracetamol"]
    assert [m["name"] for m in by_generic] == ["Paracetamol"]
    assert [m["name"] for m in by_category] == ["Hydrocortisone", "Clotrimazole", "Betamethasone"]


def test_blank_query_returns_nothing(client):
    assert client.get("/medicines/search", params={"q": "   "}).json() == []
    assert client.get("/medicines/search").json() == []


def test_results_are_capped_at_ten():
    catalog = tuple(
        Medicine(id=str(n), name=f"Vitamin {n}", generic_name="x", dosage="1mg", form="tablet", category="Vitamins")
        for n in range(15)
    )

    assert len(MedicineService(catalog).search("vitamin")) == 10


def test_categories_in_catalog_order(client):
    categories = client.get("/medicines/categories").json()

    assert categories[0] == "Pain Relief"
    assert len(categories) == len(set(categories))
    assert set(categories) == {m.category for m in load_catalog()}
