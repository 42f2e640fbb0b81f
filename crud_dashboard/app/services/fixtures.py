"""
Seed data loaded into the stores at startup.

The records follow the well known JSONPlaceholder demo data so the
dashboard has something to show on first launch.  Nothing written at
runtime survives a restart.
"""

from typing import List

from ..schemas.post import PostRead
from ..schemas.user import UserRead


def seed_users() -> List[UserRead]:
    return [
        UserRead(
            id=1,
            name="Leanne Graham",
            username="Bret",
            email="Sincere@april.biz",
            phone="1-770-736-8031 x56442",
            website="hildegard.org",
            address={
                "street": "Kulas Light",
                "suite": "Apt. 556",
                "city": "Gwenborough",
                "zipcode": "92998-3874",
                "geo": {"lat": "-37.3159", "lng": "81.1496"},
            },
            company={
                "name": "Romaguera-Crona",
                "catchPhrase": "Multi-layered client-server neural-net",
                "bs": "harness real-time e-markets",
            },
        ),
        UserRead(
            id=2,
            name="Ervin Howell",
            username="Antonette",
            email="Shanna@melissa.tv",
            phone="010-692-6593 x09125",
            website="anastasia.net",
            address={
                "street": "Victor Plains",
                "suite": "Suite 879",
                "city": "Wisokyburgh",
                "zipcode": "90566-7771",
                "geo": {"lat": "-43.9509", "lng": "-34.4618"},
            },
            company={
                "name": "Deckow-Crist",
                "catchPhrase": "Proactive didactic contingency",
                "bs": "synergize scalable supply-chains",
            },
        ),
        UserRead(
            id=3,
            name="Clementine Bauch",
            username="Samantha",
            email="Nathan@yesenia.net",
            phone="1-463-123-4447",
            website="ramiro.info",
            address={
                "street": "Douglas Extension",
                "suite": "Suite 847",
                "city": "McKenziehaven",
                "zipcode": "59590-4157",
                "geo": {"lat": "-68.6102", "lng": "-47.0653"},
            },
            company={
                "name": "Romaguera-Jacobson",
                "catchPhrase": "Face to face bifurcated interface",
                "bs": "e-enable strategic applications",
            },
        ),
    ]


def seed_posts() -> List[PostRead]:
    rows = [
        (1, 1, "sunt aut facere repellat provident occaecati excepturi optio reprehenderit",
         "quia et suscipit\nsuscipit recusandae consequuntur expedita et cum\n"
         "reprehenderit molestiae ut ut quas totam\nnostrum rerum est autem sunt rem eveniet architecto"),
        (2, 1, "qui est esse",
         "est rerum tempore vitae\nsequi sint nihil reprehenderit dolor beatae ea dolores neque\n"
         "fugiat blanditiis voluptate porro vel nihil molestiae ut reiciendis\nqui aperiam non debitis possimus qui neque nisi nulla"),
        (3, 1, "ea molestias quasi exercitationem repellat qui ipsa sit aut",
         "et iusto sed quo iure\nvoluptatem occaecati omnis eligendi aut ad\n"
         "voluptatem doloribus vel accusantium quis pariatur\nmolestiae porro eius odio et labore et velit aut"),
        (4, 1, "eum et est occaecati",
         "ullam et saepe reiciendis voluptatem adipisci\nsit amet autem assumenda provident rerum culpa\n"
         "quis hic commodi nesciunt rem tenetur doloremque ipsam iure\nquis sunt voluptatem rerum illo velit"),
        (5, 1, "nesciunt quas odio",
         "repudiandae veniam quaerat sunt sed\nalias aut fugiat sit autem sed est\n"
         "voluptatem omnis possimus esse voluptatibus quis\nest aut tenetur dolor neque"),
        (6, 2, "dolorem eum magni eos aperiam quia",
         "ut aspernatur corporis harum nihil quis provident sequi\nmollitia nobis aliquid molestiae\n"
         "perspiciatis et ea nemo ab reprehenderit accusantium quas\nvoluptate dolores velit et doloremque molestiae"),
        (7, 2, "magnam facilis autem",
         "dolore placeat quibusdam ea quo vitae\nmagni quis enim qui quis quo nemo aut saepe\n"
         "quidem repellat excepturi ut quia\nsunt ut sequi eos ea sed quas"),
        (8, 2, "dolorem dolore est ipsam",
         "dignissimos aperiam dolorem qui eum\nfacilis quibusdam animi sint suscipit qui sint possimus cum\n"
         "quaerat magni maiores excepturi\nipsam ut commodi dolor voluptatum modi aut vitae"),
        (9, 3, "nesciunt iure omnis dolorem tempora et accusantium",
         "consectetur animi nesciunt iure dolore\nenim quia ad\n"
         "veniam autem ut quam aut nobis\net est aut quod aut provident voluptas autem voluptas"),
        (10, 3, "optio molestias id quia eum",
         "quo et expedita modi cum officia vel magni\ndoloribus qui repudiandae\n"
         "vero nisi sit\nquos veniam quod sed accusamus veritatis error"),
    ]
    return [PostRead(id=pid, user_id=uid, title=title, body=body) for pid, uid, title, body in rows]
