import pyarrow as pa

from selectquery import Query

table = pa.table(
    {
        "Product": ["Videogame", "Laptop", "Laptop", "Phone"],
        "Quantity": [8, 8, 7, 3],
        "Price": [66.5, 38.72, 77.46, 120.0],
    }
)

laptops = Query.from_arrow(table).where("Product", "===", "Laptop")
print(laptops)
print("Total quantity:", laptops.sum("Quantity"))
print(laptops.select("Price").to_arrow())
