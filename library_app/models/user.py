from library_app.extensions import db

class User(db.Model):
    __tablename__ = "users"

    # system-assigned, never overwritten by updates
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), nullable=False)

    def to_dict(self):
        return {"id": self.id, "name": self.name, "email": self.email}
