from mindat_api import MindatClient, GeomaterialsQuery, LocalitiesQuery, GeomaterialsOrdering
from mindat_api.api.models import CrystalSystem

# reads MINDAT_API_KEY (and optional MINDAT_API_BASE_URL / timeouts) from the environment or a .env file
client = MindatClient.from_config()

# IMA-approved trigonal copper minerals, most widely reported first
query = (GeomaterialsQuery()
         .ima_approved(True)
         .with_elements("Cu")
         .crystal_systems([CrystalSystem.TRIGONAL])
         .order_by(GeomaterialsOrdering.LOCALITY_ENTRIES_DESC)
         .select_fields("id,name,mindat_formula,minstats")
         .with_page_size(20))

minerals = client.geomaterials(query)

if not minerals:
    raise ValueError(f"Retrieval unsuccessful: {minerals.message}")

page = minerals.data
print(f"Total matches: {page.count} across {page.total_pages(20)} pages")

for mineral in page:
    locality_count = mineral.minstats.ms_locentries if mineral.minstats else None
    print(f"{mineral.id!s:>6}  {mineral.name or '':<30} {mineral.mindat_formula}  ({locality_count} localities)")

# localities are cursor paginated: follow the `next` link until it runs out or five pages were read
localities_query = LocalitiesQuery().with_country("Norway").with_elements("Ag")
for _ in range(5):
    localities = client.localities(localities_query)
    if not localities:
        break

    for locality in localities.data:
        if locality.has_coordinates:
            print(f"{locality.txt}: {locality.latitude:.4f}, {locality.longitude:.4f}")

    cursor = localities.data.next_cursor()
    if cursor is None:
        break
    localities_query = localities_query.with_cursor(cursor)
