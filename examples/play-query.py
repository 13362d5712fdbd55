import logging

from selectquery import Query

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

shops = [
    {"city": "Rome", "shop": "Shop 1", "n_employees": 10},
    {"city": "Rome", "shop": "Shop 4", "n_employees": 3},
    {"city": "Milan", "shop": "Shop 2", "n_employees": 15},
    {"city": "Turin", "shop": "Shop 3"},
    {"city": "Rome", "shop": "Shop 40", "n_employees": 7},
]

rome = Query(shops).where("city", "===", "Rome")
print(rome.where("shop", "^like", "shop 4").select("shop", "n_employees"))
print("---")
print("Employees in Rome:", rome.sum("n_employees"))
print("Second page:", Query(shops).paginate(2, 2).get())
print("By shop:", list(Query(shops).key_by("shop")))
