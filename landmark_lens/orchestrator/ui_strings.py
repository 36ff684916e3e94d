# UI copy per language. The page renders these; the controller uses the
# loading.* and error.* entries for the messages it puts into state.
UI_STRINGS: dict[str, dict] = {
    "en": {
        "title": "Landmark Lens",
        "subtitle": "Discover the history behind any landmark. Just upload a photo to get started.",
        "uploadButton": "Upload Photo & Identify",
        "loading": {
            "analyzing": "Analyzing your image...",
            "generatingInfo": "Retrieving history...",
            "directions": "Generating your route...",
            "translating": "Translating...",
        },
        "error": {
            "title": "An Error Occurred",
            "invalidFile": "Please upload a valid image file (JPEG, PNG, WebP, HEIC, or RAW).",
            "recognitionFailed": "Failed to get information for the landmark in the image.",
            "translationFailed": "An error occurred while translating the result.",
        },
        "tryAgainButton": "Try Again",
        "sourcesTitle": "Sources",
        "analyzeAnotherButton": "Analyze Another Landmark",
        "getDirectionsButton": "Get Directions",
        "directionsFormTitle": "Where are you starting from?",
        "fullAddressLabel": "Your Full Address",
        "fullAddressPlaceholder": "e.g., 1600 Amphitheatre Parkway, Mountain View, CA",
        "findRouteButton": "Find Route",
        "cancelButton": "Cancel",
        "directionsTitle": "Your Route",
        "openInMapsButton": "Open in Google Maps",
        "clearDirectionsButton": "Clear Directions",
    },
    "id": {
        "title": "Lensa Markah Tanah",
        "subtitle": "Temukan sejarah di balik markah tanah apa pun. Cukup unggah foto untuk memulai.",
        "uploadButton": "Unggah Foto & Identifikasi",
        "loading": {
            "analyzing": "Menganalisis gambar Anda...",
            "generatingInfo": "Mengambil data sejarah...",
            "directions": "Membuat rute Anda...",
            "translating": "Menerjemahkan...",
        },
        "error": {
            "title": "Terjadi Kesalahan",
            "invalidFile": "Harap unggah file gambar yang valid (JPEG, PNG, WebP, HEIC, atau RAW).",
            "recognitionFailed": "Gagal mendapatkan informasi markah tanah dalam gambar.",
            "translationFailed": "Terjadi kesalahan saat menerjemahkan hasil.",
        },
        "tryAgainButton": "Coba Lagi",
        "sourcesTitle": "Sumber",
        "analyzeAnotherButton": "Analisis Markah Tanah Lain",
        "getDirectionsButton": "Dapatkan Arah",
        "directionsFormTitle": "Anda mulai dari mana?",
        "fullAddressLabel": "Alamat Lengkap Anda",
        "fullAddressPlaceholder": "cth., Jalan Jenderal Sudirman Kav. 52-53, Jakarta Selatan",
        "findRouteButton": "Cari Rute",
        "cancelButton": "Batal",
        "directionsTitle": "Rute Anda",
        "openInMapsButton": "Buka di Google Maps",
        "clearDirectionsButton": "Hapus Arah",
    },
}
