"""
Tests de imágenes del bureau: banner de bienvenida, slider y galería
"""
from bureau_admin.models import BureauProfile, SliderImage, GalleryImage


def image_file(name="banner.jpg"):
    return {"image": (name, b"\xff\xd8\xff", "image/jpeg")}


# ============================================================================
# BANNER DE BIENVENIDA
# ============================================================================

def test_upload_banner(client, db, create_bureau, upload_root):
    bureau_id = create_bureau()

    response = client.put("/api/bureau/uploadBanner", data={"bureauId": bureau_id}, files=image_file("welcome.jpg"))
    assert response.status_code == 200
    image_url = response.json()["imageUrl"]
    assert image_url.startswith("/homebanners/")
    assert image_url.endswith("-welcome.jpg")

    bureau = db.query(BureauProfile).filter(BureauProfile.bureauId == bureau_id).one()
    assert bureau.welcomeImageBanner == image_url
    assert (upload_root / "homebanners" / image_url.rsplit("/", 1)[-1]).exists()


def test_upload_banner_unknown_bureau(client):
    response = client.put("/api/bureau/uploadBanner", data={"bureauId": "1111111"}, files=image_file())
    assert response.status_code == 404
    assert response.json()["message"] == "Bureau not found."


def test_upload_banner_without_image(client, create_bureau):
    bureau_id = create_bureau()

    response = client.put("/api/bureau/uploadBanner", data={"bureauId": bureau_id})
    assert response.status_code == 400
    assert response.json()["message"] == "Please provide bureauId and an image to upload."


# ============================================================================
# SLIDER
# ============================================================================

def test_slider_upload_and_list(client, create_bureau):
    bureau_id = create_bureau()

    upload = client.post("/api/bureau/slider", data={"bureauId": bureau_id}, files=image_file("slide1.jpg"))
    assert upload.status_code == 200
    image_url = upload.json()["imageUrl"]
    assert image_url.startswith("/bannerimages/")

    response = client.get("/api/bureau/getBannerImages", params={"bureauId": bureau_id})
    assert response.status_code == 200
    images = response.json()["bannerImages"]
    assert len(images) == 1
    assert images[0]["imageUrl"] == image_url
    assert isinstance(images[0]["id"], int)


def test_slider_upload_unknown_bureau_is_stored(client, db):
    """bureauId no se valida: la fila se inserta aunque el bureau no exista"""
    response = client.post("/api/bureau/slider", data={"bureauId": "1111111"}, files=image_file())
    assert response.status_code == 200

    rows = db.query(SliderImage).all()
    assert len(rows) == 1
    assert rows[0].bureauId == "1111111"
    assert rows[0].imageUrl == response.json()["imageUrl"]


def test_gallery_upload_unknown_bureau_is_stored(client, db):
    response = client.post("/api/gallery/upload", data={"bureauId": "1111111"}, files=image_file())
    assert response.status_code == 200
    assert db.query(GalleryImage).filter(GalleryImage.bureauId == "1111111").count() == 1


def test_slider_upload_missing_bureau_id(client):
    response = client.post("/api/bureau/slider", files=image_file())
    assert response.status_code == 400


def test_slider_list_empty_is_not_found(client, create_bureau):
    bureau_id = create_bureau()

    response = client.get("/api/bureau/getBannerImages", params={"bureauId": bureau_id})
    assert response.status_code == 404
    assert response.json()["message"] == "No images found for the given bureau."


def test_slider_list_requires_bureau_id(client):
    assert client.get("/api/bureau/getBannerImages").status_code == 400


def test_delete_slider_image(client, db, create_bureau):
    bureau_id = create_bureau()
    for name in ("a.jpg", "b.jpg", "c.jpg"):
        client.post("/api/bureau/slider", data={"bureauId": bureau_id}, files=image_file(name))
    images = client.get("/api/bureau/getBannerImages", params={"bureauId": bureau_id}).json()["bannerImages"]
    target = images[1]["id"]

    response = client.delete(f"/api/deleteBannerImage/{target}")
    assert response.status_code == 200
    assert response.json() == {"message": "Image deleted successfully."}

    remaining = {image.id for image in db.query(SliderImage).all()}
    assert remaining == {images[0]["id"], images[2]["id"]}

    # Segundo intento sobre el mismo id
    again = client.delete(f"/api/deleteBannerImage/{target}")
    assert again.status_code == 404
    assert again.json()["message"] == "Image not found."


def test_delete_slider_image_invalid_id(client):
    assert client.delete("/api/deleteBannerImage/abc").status_code == 400


# ============================================================================
# GALERÍA
# ============================================================================

def test_gallery_upload_list_delete(client, db, create_bureau):
    bureau_id = create_bureau()

    upload = client.post("/api/gallery/upload", data={"bureauId": bureau_id}, files=image_file("evento.jpg"))
    assert upload.status_code == 200
    assert upload.json()["imageUrl"].startswith("/galleryimages/")

    listing = client.get("/api/gallery/getImages", params={"bureauId": bureau_id})
    assert listing.status_code == 200
    images = listing.json()["galleryImages"]
    assert len(images) == 1

    deleted = client.delete(f"/api/deleteGalleryImage/{images[0]['id']}")
    assert deleted.status_code == 200
    assert db.query(GalleryImage).count() == 0

    assert client.get("/api/gallery/getImages", params={"bureauId": bureau_id}).status_code == 404


def test_gallery_and_slider_are_independent(client, db, create_bureau):
    bureau_id = create_bureau()
    client.post("/api/bureau/slider", data={"bureauId": bureau_id}, files=image_file("slide.jpg"))

    assert client.get("/api/gallery/getImages", params={"bureauId": bureau_id}).status_code == 404
    assert db.query(SliderImage).count() == 1
    assert db.query(GalleryImage).count() == 0


def test_delete_gallery_image_not_found(client):
    assert client.delete("/api/deleteGalleryImage/999").status_code == 404
