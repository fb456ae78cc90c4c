from typing import Dict, Iterable, List, Mapping, Optional


class BadgeCache:
    """
    Copia local de las badges de UNA tienda para el panel, indexada por id.
    Solo cambia con confirmaciones del servidor (createdRecords,
    updatedRecord, deletedId); nunca se edita de forma optimista.

    Modelo de referencia del lado cliente: el backend no la usa; define cómo
    el panel debe reconciliar su lista con las respuestas de POST /app/badges.
    """

    def __init__(self, records: Iterable[Mapping] = ()):
        self._by_id: Dict[str, dict] = {}
        self._order: List[str] = []
        for r in records:
            self._by_id[r["id"]] = dict(r)
            self._order.append(r["id"])

    def __len__(self) -> int:
        return len(self._order)

    def get(self, badge_id: str) -> Optional[dict]:
        return self._by_id.get(badge_id)

    def items(self) -> List[dict]:
        return [self._by_id[i] for i in self._order]

    def apply(self, response: Mapping) -> None:
        """Aplica la respuesta del endpoint del panel (una sola clave por respuesta)."""
        created = response.get("createdRecords")
        if created:
            new_ids = []
            for r in created:
                self._by_id[r["id"]] = dict(r)
                new_ids.append(r["id"])
            # los nuevos van arriba, conservando el orden recibido
            self._order = new_ids + [i for i in self._order if i not in new_ids]

        updated = response.get("updatedRecord")
        if updated and updated["id"] in self._by_id:
            self._by_id[updated["id"]].update(name=updated["name"], color=updated["color"])

        deleted = response.get("deletedId")
        if deleted and deleted in self._by_id:
            del self._by_id[deleted]
            self._order.remove(deleted)
